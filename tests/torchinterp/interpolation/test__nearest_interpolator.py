"""Tests for nearest-neighbor interpolation."""

import pytest
import torch

from torchinterp.interpolation import NearestInterpolator, find_closest
from torchinterp.spacing import ConstantSpacing, UnitSpacing, VariableSpacing


class TestFindClosest:
    """Tests for find_closest."""

    def test_unit_spacing_ties_round_up(self):
        spacing = UnitSpacing(1, 5)
        pos = torch.tensor([1.4, 1.5, 2.5, 3.49, 4.5])

        result = find_closest(spacing, pos)

        torch.testing.assert_close(result, torch.tensor([0, 1, 2, 2, 4]))

    def test_clamped_outside_range(self):
        spacing = UnitSpacing(1, 5)

        result = find_closest(spacing, torch.tensor([-3.0, 0.0, 6.0, 1e9]))

        torch.testing.assert_close(result, torch.tensor([0, 0, 4, 4]))

    def test_constant_spacing(self):
        spacing = ConstantSpacing(0.0, 1.0, 0.25)
        pos = torch.tensor([0.1, 0.3, 0.375, 0.9], dtype=torch.float64)

        result = find_closest(spacing, pos)

        torch.testing.assert_close(result, torch.tensor([0, 1, 2, 4]))

    def test_variable_spacing(self):
        spacing = VariableSpacing(torch.tensor([0.0, 1.0, 3.0, 7.0]))
        pos = torch.tensor([0.4, 1.9, 2.0, 2.1, 6.0, 8.0])

        result = find_closest(spacing, pos)

        torch.testing.assert_close(result, torch.tensor([0, 1, 2, 2, 3, 3]))

    def test_variable_spacing_repeated_positions(self):
        """Repeated positions resolve to the highest index carrying them."""
        spacing = VariableSpacing(torch.tensor([0.0, 1.0, 1.0, 2.0]))
        pos = torch.tensor([0.5, 0.9, 1.0, 1.2, 1.5])

        result = find_closest(spacing, pos)

        torch.testing.assert_close(result, torch.tensor([2, 2, 2, 2, 3]))

    def test_variable_spacing_repeated_first(self):
        spacing = VariableSpacing(torch.tensor([0.0, 0.0, 1.0]))

        result = find_closest(spacing, torch.tensor([-1.0, 0.0, 0.2]))

        torch.testing.assert_close(result, torch.tensor([1, 1, 1]))

    def test_single_position(self):
        spacing = VariableSpacing(torch.tensor([2.0]))

        result = find_closest(spacing, torch.tensor([0.0, 2.0, 5.0]))

        torch.testing.assert_close(result, torch.tensor([0, 0, 0]))


class TestNearestInterpolator:
    """Tests for NearestInterpolator."""

    @pytest.mark.parametrize(
        "x, expected",
        [(1.4, 10), (1.5, 20), (2.5, 30), (0.0, 10), (6.0, 50), (5.0, 50)],
    )
    def test_unit_spacing_values(self, x, expected):
        f = NearestInterpolator(
            torch.tensor([10, 20, 30, 40, 50]), UnitSpacing(1, 5)
        )

        assert f(x).item() == expected

    def test_keeps_data_dtype(self):
        f = NearestInterpolator(torch.tensor([10, 20, 30]))

        assert f(0.7).dtype == torch.int64

    def test_reproduces_data_at_knots(self):
        knots = torch.tensor([-1.0, 0.0, 0.5, 2.0, 2.25], dtype=torch.float64)
        data = torch.rand(5, dtype=torch.float64)
        f = NearestInterpolator(data, VariableSpacing(knots))

        torch.testing.assert_close(f(knots), data, atol=0, rtol=0)

    def test_two_dimensional(self):
        data = torch.arange(12).reshape(3, 4)
        f = NearestInterpolator(data)

        assert f(1.2, 2.6).item() == 7
        assert f(-1.0, 10.0).item() == 3

    def test_mixed_spacings(self):
        data = torch.arange(12).reshape(3, 4)
        spacing = (
            ConstantSpacing(0.0, 1.0, 0.5),
            VariableSpacing(torch.tensor([0.0, 1.0, 10.0, 11.0])),
        )
        f = NearestInterpolator(data, spacing)

        assert f(0.6, 6.0).item() == data[1, 2].item()

    def test_vectorised(self):
        f = NearestInterpolator(torch.tensor([10.0, 20.0, 30.0]), UnitSpacing(1, 3))

        result = f(torch.tensor([[1.0, 1.6], [2.4, 9.0]]))

        torch.testing.assert_close(result, torch.tensor([[10.0, 20.0], [20.0, 30.0]]))

    def test_scipy_comparison(self):
        """Matches scipy.interpolate.RegularGridInterpolator away from ties."""
        pytest.importorskip("scipy")
        from scipy.interpolate import RegularGridInterpolator

        torch.manual_seed(0)
        x = torch.cumsum(torch.rand(6, dtype=torch.float64) + 0.1, dim=0)
        y = torch.linspace(-1.0, 1.0, 5, dtype=torch.float64)
        data = torch.rand(6, 5, dtype=torch.float64)

        f = NearestInterpolator(
            data, (VariableSpacing(x), ConstantSpacing.from_tensor(y))
        )
        reference = RegularGridInterpolator(
            (x.numpy(), y.numpy()), data.numpy(), method="nearest"
        )

        qx = x[0] + (x[-1] - x[0]) * torch.rand(50, dtype=torch.float64)
        qy = -1.0 + 2.0 * torch.rand(50, dtype=torch.float64)
        expected = torch.from_numpy(
            reference(torch.stack([qx, qy], dim=-1).numpy())
        )

        torch.testing.assert_close(f(qx, qy), expected)
