import numpy as np

def sigma_activation(z):
    """
    The CTRNN activation: 1 / (1 + e^z).

    Note the sign of the exponent. This is the logistic function mirrored
    around z=0, so it *decreases* from 1 to 0 as z grows. The weight ranges
    of the network are calibrated against this orientation.
    """
    # e^709 ~ 8.2e307 is the largest power of e a float64 holds, so the
    # result is exact wherever exp does not overflow
    z_clipped = np.clip(z, -709.0, 709.0)
    return 1.0 / (1.0 + np.exp(z_clipped))
