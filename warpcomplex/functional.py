"""
Torch entry points for the complex device functions.

Each function launches one Warp thread per element and evaluates the
matching ``warpcomplex.warp`` function on that single sample. Inputs are
evaluated in complex64 (float32 components); results keep the broadcast
input shape and carry no autograd history.
"""
import numbers
import warnings
from typing import Any, Callable, Optional, Tuple

import torch
import warp as wp
from torch import Tensor

from warpcomplex.config import DEFAULT_CONFIG, KernelConfig
from warpcomplex.warp import (
    cabs,
    cacos,
    cacosh,
    carg,
    casin,
    casinh,
    catan,
    catanh,
    cconj,
    ccos,
    ccosh,
    cdiv,
    cdiv_unguarded,
    cexp,
    cfrom_polar,
    cinv,
    cinv_unguarded,
    clog,
    cmul,
    cnormalize,
    cpow,
    cpowi,
    cpowi_squaring,
    csin,
    csinh,
    csqrt,
    csquare,
    ctan,
    ctanh,
    cto_polar,
)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _unary_kernel(func: Callable) -> "wp.Kernel":
    @wp.kernel(module="unique")
    def _kernel(
        z: wp.array(dtype=wp.vec2),
        out: wp.array(dtype=wp.vec2),
    ) -> None:
        i = wp.tid()
        out[i] = func(z[i])

    return _kernel


def _binary_kernel(func: Callable) -> "wp.Kernel":
    @wp.kernel(module="unique")
    def _kernel(
        a: wp.array(dtype=wp.vec2),
        b: wp.array(dtype=wp.vec2),
        out: wp.array(dtype=wp.vec2),
    ) -> None:
        i = wp.tid()
        out[i] = func(a[i], b[i])

    return _kernel


def _real_kernel(func: Callable) -> "wp.Kernel":
    @wp.kernel(module="unique")
    def _kernel(
        z: wp.array(dtype=wp.vec2),
        out: wp.array(dtype=wp.float32),
    ) -> None:
        i = wp.tid()
        out[i] = func(z[i])

    return _kernel


def _integer_power_kernel(func: Callable) -> "wp.Kernel":
    @wp.kernel(module="unique")
    def _kernel(
        z: wp.array(dtype=wp.vec2),
        n: wp.int32,
        out: wp.array(dtype=wp.vec2),
    ) -> None:
        i = wp.tid()
        out[i] = func(z[i], n)

    return _kernel


@wp.kernel
def _from_polar_kernel(
    radius: wp.array(dtype=wp.float32),
    angle: wp.array(dtype=wp.float32),
    out: wp.array(dtype=wp.vec2),
) -> None:
    i = wp.tid()
    out[i] = cfrom_polar(radius[i], angle[i])


_conj_kernel = _unary_kernel(cconj)
_square_kernel = _unary_kernel(csquare)
_inv_kernel = _unary_kernel(cinv)
_inv_unguarded_kernel = _unary_kernel(cinv_unguarded)
_log_kernel = _unary_kernel(clog)
_exp_kernel = _unary_kernel(cexp)
_sqrt_kernel = _unary_kernel(csqrt)
_sin_kernel = _unary_kernel(csin)
_cos_kernel = _unary_kernel(ccos)
_tan_kernel = _unary_kernel(ctan)
_sinh_kernel = _unary_kernel(csinh)
_cosh_kernel = _unary_kernel(ccosh)
_tanh_kernel = _unary_kernel(ctanh)
_asin_kernel = _unary_kernel(casin)
_acos_kernel = _unary_kernel(cacos)
_atan_kernel = _unary_kernel(catan)
_asinh_kernel = _unary_kernel(casinh)
_acosh_kernel = _unary_kernel(cacosh)
_atanh_kernel = _unary_kernel(catanh)
_normalize_kernel = _unary_kernel(cnormalize)
_to_polar_kernel = _unary_kernel(cto_polar)

_mul_kernel = _binary_kernel(cmul)
_div_kernel = _binary_kernel(cdiv)
_div_unguarded_kernel = _binary_kernel(cdiv_unguarded)
_pow_kernel = _binary_kernel(cpow)

_abs_kernel = _real_kernel(cabs)
_arg_kernel = _real_kernel(carg)

_powi_linear_kernel = _integer_power_kernel(cpowi)
_powi_squaring_kernel = _integer_power_kernel(cpowi_squaring)


def _as_complex64(z: Any, config: KernelConfig) -> Tensor:
    z = torch.as_tensor(z).detach()
    if not z.is_complex():
        z = z.to(torch.float32)
        return torch.complex(z, torch.zeros_like(z))
    if z.dtype != torch.complex64:
        if config.warn_on_downcast:
            warnings.warn(
                f"{z.dtype} input is evaluated in complex64", UserWarning, stacklevel=4
            )
        z = z.to(torch.complex64)
    return z.resolve_conj()


def _as_float32(x: Any) -> Tensor:
    x = torch.as_tensor(x)
    if x.is_complex():
        raise TypeError(f"Expected a real tensor, got {x.dtype}")
    return x.detach().to(torch.float32)


def _to_vec2(z: Tensor) -> wp.array:
    z = z.contiguous().reshape(-1)
    return wp.from_torch(torch.view_as_real(z), dtype=wp.vec2)


def _to_float32(x: Tensor) -> wp.array:
    return wp.from_torch(x.contiguous().reshape(-1))


def _launch(
    kernel: "wp.Kernel",
    inputs: list,
    out_dtype: type,
    n: int,
    device: "wp.context.Device",
) -> wp.array:
    out = wp.empty((n,), dtype=out_dtype, device=device)
    wp.launch(
        kernel=kernel,
        dim=n,
        inputs=inputs,
        outputs=[out],
        device=device,
    )
    return out


def _unary(kernel: "wp.Kernel", z: Any, config: Optional[KernelConfig]) -> Tensor:
    config = config or DEFAULT_CONFIG
    z = _as_complex64(z, config)
    if z.numel() == 0:
        return torch.empty_like(z)
    device = wp.device_from_torch(z.device)
    out = _launch(kernel, [_to_vec2(z)], wp.vec2, z.numel(), device)
    return torch.view_as_complex(wp.to_torch(out)).reshape(z.shape)


def _binary(
    kernel: "wp.Kernel", a: Any, b: Any, config: Optional[KernelConfig]
) -> Tensor:
    config = config or DEFAULT_CONFIG
    a, b = torch.broadcast_tensors(_as_complex64(a, config), _as_complex64(b, config))
    if a.numel() == 0:
        return torch.empty_like(a)
    device = wp.device_from_torch(a.device)
    out = _launch(kernel, [_to_vec2(a), _to_vec2(b)], wp.vec2, a.numel(), device)
    return torch.view_as_complex(wp.to_torch(out)).reshape(a.shape)


def _real(kernel: "wp.Kernel", z: Any, config: Optional[KernelConfig]) -> Tensor:
    config = config or DEFAULT_CONFIG
    z = _as_complex64(z, config)
    if z.numel() == 0:
        return torch.empty(z.shape, dtype=torch.float32, device=z.device)
    device = wp.device_from_torch(z.device)
    out = _launch(kernel, [_to_vec2(z)], wp.float32, z.numel(), device)
    return wp.to_torch(out).reshape(z.shape)


# ---------------------------------------------------------------------------
# Primitive arithmetic


def conj(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_conj_kernel, z, config)


def mul(a: Any, b: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _binary(_mul_kernel, a, b, config)


def square(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_square_kernel, z, config)


def inv(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    """Reciprocal 1 / z.

    With the default ``zero_division="saturate"`` an exact zero maps to
    (0, 0). With ``"propagate"`` it maps to NaN components instead.
    """
    config = config or DEFAULT_CONFIG
    if config.zero_division == "saturate":
        return _unary(_inv_kernel, z, config)
    return _unary(_inv_unguarded_kernel, z, config)


def div(a: Any, b: Any, config: Optional[KernelConfig] = None) -> Tensor:
    """Quotient a / b computed as a * inv(b).

    Follows the same zero policy as :func:`inv`: under the default
    configuration ``div(a, 0) == 0``, so div is not the inverse of mul there.
    """
    config = config or DEFAULT_CONFIG
    if config.zero_division == "saturate":
        return _binary(_div_kernel, a, b, config)
    return _binary(_div_unguarded_kernel, a, b, config)


def abs(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _real(_abs_kernel, z, config)


def arg(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _real(_arg_kernel, z, config)


# ---------------------------------------------------------------------------
# Transcendental base, square root and powers


def log(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_log_kernel, z, config)


def exp(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_exp_kernel, z, config)


def sqrt(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_sqrt_kernel, z, config)


def pow(a: Any, b: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _binary(_pow_kernel, a, b, config)


def powi(z: Any, n: int, config: Optional[KernelConfig] = None) -> Tensor:
    """Integer power z**n; ``n == 0`` gives (1, 0) everywhere."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"Exponent must be an integer, got {type(n).__name__}")
    if not _INT32_MIN < n <= _INT32_MAX:
        raise ValueError(f"Exponent {n} does not fit in int32")
    config = config or DEFAULT_CONFIG
    z = _as_complex64(z, config)
    if z.numel() == 0:
        return torch.empty_like(z)
    if config.powi_strategy == "linear":
        kernel = _powi_linear_kernel
    else:
        kernel = _powi_squaring_kernel
    device = wp.device_from_torch(z.device)
    out = _launch(kernel, [_to_vec2(z), int(n)], wp.vec2, z.numel(), device)
    return torch.view_as_complex(wp.to_torch(out)).reshape(z.shape)


# ---------------------------------------------------------------------------
# Trigonometric and hyperbolic


def sin(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_sin_kernel, z, config)


def cos(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_cos_kernel, z, config)


def tan(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_tan_kernel, z, config)


def sinh(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_sinh_kernel, z, config)


def cosh(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_cosh_kernel, z, config)


def tanh(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_tanh_kernel, z, config)


def asin(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_asin_kernel, z, config)


def acos(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_acos_kernel, z, config)


def atan(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_atan_kernel, z, config)


def asinh(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_asinh_kernel, z, config)


def acosh(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_acosh_kernel, z, config)


def atanh(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    return _unary(_atanh_kernel, z, config)


# ---------------------------------------------------------------------------
# Polar form


def from_polar(radius: Any, angle: Any) -> Tensor:
    radius, angle = torch.broadcast_tensors(_as_float32(radius), _as_float32(angle))
    if radius.numel() == 0:
        return torch.empty(radius.shape, dtype=torch.complex64, device=radius.device)
    device = wp.device_from_torch(radius.device)
    out = _launch(
        _from_polar_kernel,
        [_to_float32(radius), _to_float32(angle)],
        wp.vec2,
        radius.numel(),
        device,
    )
    return torch.view_as_complex(wp.to_torch(out)).reshape(radius.shape)


def to_polar(z: Any, config: Optional[KernelConfig] = None) -> Tuple[Tensor, Tensor]:
    """Return ``(radius, angle)`` with angle in (-pi, pi]."""
    polar = torch.view_as_real(_unary(_to_polar_kernel, z, config))
    return polar[..., 0], polar[..., 1]


def normalize(z: Any, config: Optional[KernelConfig] = None) -> Tensor:
    """z / |z|; NaN at z = 0."""
    return _unary(_normalize_kernel, z, config)
