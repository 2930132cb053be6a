class InvalidRuleSet(ValueError):
    """Price rules can't be used, e.g. the mandatory `default` price is missing"""
    pass


class StaleDataWarning(UserWarning):
    """Busy dates or price rules failed to load; the last good data stays in use"""
    pass
