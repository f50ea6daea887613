from cascadecss.store.ordered import OrderedRuleStore

__all__ = ["OrderedRuleStore"]
