from scipy.special import gammaln


def gamma_ln(z: float) -> float:
    """Return the natural logarithm of the gamma function at ``z``."""
    return float(gammaln(z))
