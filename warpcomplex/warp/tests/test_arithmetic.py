from unittest import TestCase, main

import numpy as np
import torch
import warp as wp

import warpcomplex.functional as F
from warpcomplex import KernelConfig

wp.init()


def _assert_close(
    actual: torch.Tensor,
    expected: torch.Tensor,
    rtol: float = 1e-5,
    atol: float = 1e-6,
) -> None:
    np.testing.assert_allclose(actual.numpy(), expected.numpy(), rtol=rtol, atol=atol)


def _random_complex(n: int, scale: float = 1.0) -> torch.Tensor:
    generator = torch.Generator().manual_seed(0)
    return torch.randn(n, dtype=torch.complex64, generator=generator) * scale


class TestPrimitiveArithmetic(TestCase):
    def test_mul(self) -> None:
        a = torch.tensor([1 + 2j], dtype=torch.complex64)
        b = torch.tensor([3 + 4j], dtype=torch.complex64)
        self.assertEqual(F.mul(a, b).tolist(), [-5 + 10j])

    def test_mul_commutes(self) -> None:
        a = _random_complex(64)
        b = _random_complex(64, scale=3.0).flip(0)
        _assert_close(F.mul(a, b), F.mul(b, a), rtol=1e-6, atol=1e-6)

    def test_mul_matches_torch(self) -> None:
        a = _random_complex(64)
        b = _random_complex(64, scale=5.0).flip(0)
        _assert_close(F.mul(a, b), a * b, rtol=1e-5, atol=1e-6)

    def test_mul_broadcasts(self) -> None:
        a = _random_complex(3).reshape(3, 1)
        b = _random_complex(4).reshape(1, 4)
        out = F.mul(a, b)
        self.assertEqual(out.shape, (3, 4))
        _assert_close(out, a * b, rtol=1e-5, atol=1e-6)

    def test_conj_is_involution(self) -> None:
        z = _random_complex(32)
        self.assertTrue(torch.equal(F.conj(F.conj(z)), z))
        self.assertTrue(torch.equal(F.conj(z), torch.conj(z).resolve_conj()))

    def test_square_equals_mul(self) -> None:
        z = torch.tensor(
            [1 + 2j, 3 - 5j, 0.5 - 0.25j, -7 + 0j, 0 - 3j], dtype=torch.complex64
        )
        self.assertTrue(torch.equal(F.square(z), F.mul(z, z)))

        z = _random_complex(64, scale=10.0)
        _assert_close(F.square(z), F.mul(z, z), rtol=1e-6, atol=1e-6)

    def test_inv_of_zero_saturates(self) -> None:
        out = F.inv(torch.zeros(1, dtype=torch.complex64))
        self.assertEqual(out.tolist(), [0j])

    def test_inv_of_zero_propagates(self) -> None:
        config = KernelConfig(zero_division="propagate")
        out = F.inv(torch.zeros(1, dtype=torch.complex64), config)
        self.assertTrue(torch.isnan(out.real).all())
        self.assertTrue(torch.isnan(out.imag).all())

    def test_inv_of_tiny_overflows(self) -> None:
        # |z|^2 underflows to zero, so re / 0 is inf and 0 / 0 is NaN
        out = F.inv(torch.tensor([1e-30 + 0j], dtype=torch.complex64))
        self.assertTrue(torch.isposinf(out.real).all())
        self.assertTrue(torch.isnan(out.imag).all())

    def test_mul_by_inverse_is_one(self) -> None:
        one = torch.ones(64, dtype=torch.complex64)
        for scale in (1e-10, 1.0, 1e10):
            a = _random_complex(64, scale=scale)
            out = F.mul(a, F.inv(a))
            _assert_close(out, one, rtol=0.0, atol=1e-6)

    def test_div_is_mul_by_inverse(self) -> None:
        a = _random_complex(64)
        b = torch.cat(
            (_random_complex(63, scale=2.0), torch.zeros(1, dtype=torch.complex64))
        )
        _assert_close(
            F.div(a, b), F.mul(a, F.inv(b)), rtol=1e-6, atol=1e-6
        )

    def test_div_by_zero(self) -> None:
        a = torch.tensor([1 + 2j, -3 + 0.5j], dtype=torch.complex64)
        self.assertEqual(F.div(a, 0).tolist(), [0j, 0j])

        out = F.div(a, 0, KernelConfig(zero_division="propagate"))
        self.assertTrue(torch.isnan(out.real).all())

    def test_div_matches_numpy(self) -> None:
        a = _random_complex(64)
        b = _random_complex(64, scale=2.0).flip(0)
        expected = a.numpy().astype(np.complex128) / b.numpy().astype(np.complex128)
        np.testing.assert_allclose(F.div(a, b).numpy(), expected, rtol=1e-5, atol=1e-6)

    def test_abs_is_scaled(self) -> None:
        z = torch.tensor([2e38 + 1e38j, 1e-30 + 1e-30j, 3 + 4j], dtype=torch.complex64)
        out = F.abs(z)
        self.assertTrue(torch.isfinite(out).all())
        expected = np.array([np.hypot(2e38, 1e38), np.hypot(1e-30, 1e-30), 5.0])
        np.testing.assert_allclose(out.numpy(), expected, rtol=1e-6)

    def test_abs_of_infinity(self) -> None:
        z = torch.complex(
            torch.tensor([float("inf"), 1.0]), torch.tensor([1.0, float("-inf")])
        )
        self.assertTrue(torch.isposinf(F.abs(z)).all())

    def test_arg(self) -> None:
        z = torch.tensor([1 + 0j, 0 + 1j, -1 + 0j, 0 - 1j], dtype=torch.complex64)
        expected = np.array([0.0, np.pi / 2, np.pi, -np.pi / 2], dtype=np.float32)
        np.testing.assert_allclose(F.arg(z).numpy(), expected, atol=1e-6)

    def test_real_input_is_promoted(self) -> None:
        i = torch.tensor([0 + 1j], dtype=torch.complex64)
        out = F.mul(torch.tensor([2.0, -1.0]), i)
        self.assertEqual(out.dtype, torch.complex64)
        self.assertEqual(out.tolist(), [2j, -1j])

    def test_empty_input(self) -> None:
        out = F.conj(torch.empty((0, 3), dtype=torch.complex64))
        self.assertEqual(out.shape, (0, 3))


if __name__ == "__main__":
    main()
