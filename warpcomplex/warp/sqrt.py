import warp as wp

from warpcomplex.warp.arithmetic import cabs


@wp.func
def csqrt(z: wp.vec2) -> wp.vec2:
    """
    Principal square root, real part >= 0.

    Only the well conditioned component w = sqrt((|z| + |re|) / 2) is taken
    from a square root. Both terms are halved before the sum so that finite
    inputs near the float32 limit do not overflow. The other component
    follows from 2 * re(s) * im(s) = im(z), so neither component is formed
    from a difference of nearly equal values.
    For re(z) < 0 the root lies on the imaginary side and carries the sign
    of im(z); -0.0 counts as non-negative.
    """
    r = cabs(z)
    w = wp.sqrt(0.5 * r + 0.5 * wp.abs(z[0]))
    if w == 0.0:
        return wp.vec2(0.0, 0.0)
    half_inv_w = 0.5 / w
    if z[0] >= 0.0:
        return wp.vec2(w, z[1] * half_inv_w)
    if z[1] >= 0.0:
        return wp.vec2(wp.abs(z[1]) * half_inv_w, w)
    return wp.vec2(wp.abs(z[1]) * half_inv_w, -w)
