"""Tests for multilinear interpolation."""

import pytest
import torch

from torchinterp.interpolation import LinearInterpolator, find_neighbors
from torchinterp.spacing import ConstantSpacing, UnitSpacing, VariableSpacing


class TestFindNeighbors:
    """Tests for find_neighbors."""

    def test_unit_spacing(self):
        spacing = UnitSpacing(1, 4)
        pos = torch.tensor([1.0, 1.5, 2.0, 3.7, 4.0])

        lower, upper = find_neighbors(spacing, pos)

        torch.testing.assert_close(lower, torch.tensor([0, 0, 0, 2, 2]))
        torch.testing.assert_close(upper, lower + 1)

    def test_outside_range_uses_end_intervals(self):
        spacing = UnitSpacing(1, 4)

        lower, upper = find_neighbors(spacing, torch.tensor([-5.0, 0.5, 4.5, 100.0]))

        torch.testing.assert_close(lower, torch.tensor([0, 0, 2, 2]))
        torch.testing.assert_close(upper, torch.tensor([1, 1, 3, 3]))

    def test_variable_spacing(self):
        spacing = VariableSpacing(torch.tensor([0.0, 1.0, 3.0, 7.0]))
        pos = torch.tensor([-1.0, 0.0, 2.0, 3.0, 7.0, 9.0])

        lower, _ = find_neighbors(spacing, pos)

        torch.testing.assert_close(lower, torch.tensor([0, 0, 1, 2, 2, 2]))

    def test_variable_spacing_repeated_positions(self):
        """The bracket starts at the last of a run of equal positions."""
        spacing = VariableSpacing(torch.tensor([0.0, 1.0, 1.0, 2.0]))

        lower, upper = find_neighbors(spacing, torch.tensor([1.0, 1.5]))

        torch.testing.assert_close(lower, torch.tensor([2, 2]))
        torch.testing.assert_close(upper, torch.tensor([3, 3]))

    def test_single_position(self):
        lower, upper = find_neighbors(UnitSpacing(0, 0), torch.tensor([-1.0, 3.0]))

        torch.testing.assert_close(lower, torch.tensor([0, 0]))
        torch.testing.assert_close(upper, torch.tensor([0, 0]))


class TestLinearInterpolator:
    """Tests for LinearInterpolator."""

    @pytest.mark.parametrize(
        "x, expected", [(1.5, 5.0), (2.5, 15.0), (1.0, 0.0), (3.0, 20.0)]
    )
    def test_unit_spacing_values(self, x, expected):
        f = LinearInterpolator(torch.tensor([0.0, 10.0, 20.0]), UnitSpacing(1, 3))

        assert f(x).item() == pytest.approx(expected)

    def test_linear_extrapolation(self):
        f = LinearInterpolator(torch.tensor([0.0, 10.0, 20.0]), UnitSpacing(1, 3))

        assert f(0.0).item() == pytest.approx(-10.0)
        assert f(4.0).item() == pytest.approx(30.0)

    def test_integer_data_promoted(self):
        f = LinearInterpolator(torch.tensor([0, 10, 20]))

        result = f(torch.tensor(0.5, dtype=torch.float64))

        assert result.dtype == torch.float64
        assert result.item() == pytest.approx(5.0)

    @pytest.mark.parametrize(
        "spacing",
        [
            UnitSpacing(-2, 2),
            ConstantSpacing(0.0, 0.4, 0.1),
            VariableSpacing(
                torch.tensor([-1.0, 0.0, 0.5, 2.0, 2.25], dtype=torch.float64)
            ),
        ],
    )
    def test_reproduces_data_at_knots(self, spacing):
        data = torch.rand(5, dtype=torch.float64)
        f = LinearInterpolator(data, spacing)

        x = spacing.to_tensor().to(torch.float64)

        torch.testing.assert_close(f(x), data, atol=0, rtol=0)

    def test_bilinear_reproduces_plane(self):
        """A plane is interpolated and extrapolated exactly."""
        x = torch.tensor([0.0, 0.5, 2.0], dtype=torch.float64)
        y = torch.tensor([-1.0, 1.0, 2.0, 4.0], dtype=torch.float64)
        data = 2 * x[:, None] + 3 * y[None, :] + 1
        f = LinearInterpolator(data, (VariableSpacing(x), VariableSpacing(y)))

        qx = torch.tensor([0.25, 1.0, -1.0, 3.0], dtype=torch.float64)
        qy = torch.tensor([0.0, 3.5, 5.0, -2.0], dtype=torch.float64)

        torch.testing.assert_close(f(qx, qy), 2 * qx + 3 * qy + 1)

    def test_bilinear_cell_centre(self):
        f = LinearInterpolator(torch.tensor([[0.0, 1.0], [2.0, 5.0]]))

        assert f(0.5, 0.5).item() == pytest.approx(2.0)

    def test_trilinear_shape(self):
        f = LinearInterpolator(torch.rand(3, 4, 5, dtype=torch.float64))

        result = f(torch.rand(7), torch.rand(7), torch.rand(7))

        assert result.shape == (7,)

    def test_length_one_dimension(self):
        """A zero-width bracket evaluates to its lower sample."""
        f = LinearInterpolator(torch.tensor([[1.0, 3.0]]))

        assert f(5.0, 0.5).item() == pytest.approx(2.0)

    def test_repeated_last_position(self):
        data = torch.tensor([0.0, 4.0, 8.0], dtype=torch.float64)
        f = LinearInterpolator(
            data, VariableSpacing(torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64))
        )

        assert f(0.5).item() == pytest.approx(2.0)
        assert f(5.0).item() == pytest.approx(4.0)

    def test_float32_query(self):
        f = LinearInterpolator(torch.tensor([0.0, 1.0], dtype=torch.float32))

        result = f(torch.tensor([0.25], dtype=torch.float32))

        assert result.dtype == torch.float32

    def test_gradcheck_query(self):
        from torch.autograd import gradcheck

        data = torch.rand(4, 5, dtype=torch.float64)
        f = LinearInterpolator(data)

        qx = torch.tensor([0.3, 1.7, 2.2], dtype=torch.float64, requires_grad=True)
        qy = torch.tensor([0.6, 3.1, 1.4], dtype=torch.float64, requires_grad=True)

        assert gradcheck(f, (qx, qy), eps=1e-6, atol=1e-4)

    def test_gradcheck_data(self):
        from torch.autograd import gradcheck

        qx = torch.tensor([0.3, 1.7, 2.2], dtype=torch.float64)
        qy = torch.tensor([0.6, 3.1, 1.4], dtype=torch.float64)

        def eval_fn(data):
            return LinearInterpolator(data)(qx, qy)

        data = torch.rand(4, 5, dtype=torch.float64, requires_grad=True)

        assert gradcheck(eval_fn, (data,), eps=1e-6, atol=1e-4)

    def test_scipy_comparison(self):
        """Matches scipy.interpolate.RegularGridInterpolator."""
        pytest.importorskip("scipy")
        from scipy.interpolate import RegularGridInterpolator

        torch.manual_seed(0)
        x = torch.cumsum(torch.rand(6, dtype=torch.float64) + 0.1, dim=0)
        y = torch.linspace(-1.0, 1.0, 5, dtype=torch.float64)
        data = torch.rand(6, 5, dtype=torch.float64)

        f = LinearInterpolator(data, (VariableSpacing(x), UnitSpacing(0, 4)))
        reference = RegularGridInterpolator(
            (x.numpy(), torch.arange(5.0, dtype=torch.float64).numpy()),
            data.numpy(),
        )

        qx = x[0] + (x[-1] - x[0]) * torch.rand(50, dtype=torch.float64)
        qy = 4.0 * torch.rand(50, dtype=torch.float64)
        expected = torch.from_numpy(
            reference(torch.stack([qx, qy], dim=-1).numpy())
        )

        torch.testing.assert_close(f(qx, qy), expected, atol=1e-12, rtol=1e-12)
