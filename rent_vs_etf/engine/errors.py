class ComparisonDomainError(ValueError):
    """Input outside the domain where the projections are defined.

    Raised instead of returning NaN or infinity, e.g. for a zero horizon or a
    zero initial investment.
    """
