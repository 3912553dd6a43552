import numpy as np
import scipy.special as ssp

# Abramowitz & Stegun 7.1.26
_P = 0.3275911
_A = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)

def _rationalApproximation(ax):
    '''
    Evaluates 1 - (a1 t + a2 t^2 + ... + a5 t^5) exp(-x^2) with t = 1 / (1 + p x)
    for x >= 0 using Horner's scheme
    '''
    a1, a2, a3, a4, a5 = _A
    t = 1 / (1 + _P*ax)
    return 1 - (((((a5*t + a4)*t + a3)*t + a2)*t + a1)*t) * np.exp(-ax*ax)

def erf(x, exact = False):
    '''
    Gauss error function, erf(x) = 2/sqrt(pi) * int_0^x exp(-t^2) dt

    By default, this uses the rational approximation from Abramowitz & Stegun (7.1.26),
    which has an absolute error below 1.5e-7 over the real line

    Parameters
    ----------
    x : float or array of floats
    exact : bool (optional)
        If True, scipy.special.erf is evaluated instead of the approximation
        Defaults to False

    Returns
    -------
    float if x is a scalar, else array with the same shape as x
        erf(+inf) = 1 and erf(-inf) = -1
        NaN inputs evaluate to 0
    '''
    isScalar = np.ndim(x) == 0
    x = np.asarray(x, dtype=np.float64)
    x = np.where(np.isnan(x), 0, x)

    if exact:
        y = ssp.erf(x)
    else:
        # np.sign(0) = 0, so erf(0) is exactly 0
        # With ax = inf, t = 0 and exp(-inf) = 0, so the approximation evaluates to 1
        with np.errstate(over='ignore', invalid='ignore'):
            y = np.sign(x) * _rationalApproximation(np.abs(x))
        y = np.where(np.isinf(x), np.sign(x), y)

    return float(y) if isScalar else y

def erfc(x, exact = False):
    '''
    Complementary error function, erfc(x) = 1 - erf(x)

    Parameters
    ----------
    x : float or array of floats
    exact : bool (optional)
        If True, scipy.special.erfc is evaluated
        Defaults to False
    '''
    if exact:
        isScalar = np.ndim(x) == 0
        x = np.asarray(x, dtype=np.float64)
        y = ssp.erfc(np.where(np.isnan(x), 0, x))
        return float(y) if isScalar else y
    return 1 - erf(x)
