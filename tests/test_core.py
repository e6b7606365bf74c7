"""
Tests for qreg core components.
"""

import dataclasses
import logging
import math

import pytest
import numpy as np

from qreg.core.complex import Complex
from qreg.core.config import SimulatorConfig
from qreg.core.errors import (
    DimensionMismatch,
    DivisionByZero,
    DuplicateIndex,
    IndexOutOfRange,
    InvalidDimension,
    InvalidState,
    MissingArgument,
    QregError,
)
from qreg.core.field import Real
from qreg.core.gates import CNOT, H, I2, SWAP, X, Y, Z
from qreg.core.matrix import Matrix, Orientation, Vector
from qreg.core.qubit import Qubit
from qreg.core.register import QubitRegister
from qreg.utils.random_states import random_gate, random_qubit, random_register, random_unitary
from qreg.utils.validation import embed_operator, tensor_product_reference

S = 1 / math.sqrt(2)


class FixedDraw:
    """Stands in for a generator whose next uniform draw is known."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class TestComplex:
    """Tests for the Complex value type."""

    def test_arithmetic(self):
        a = Complex(1, 2)
        b = Complex(3, -1)
        assert a.plus(b) == Complex(4, 1)
        assert a.minus(b) == Complex(-2, 3)
        assert a.times(b) == Complex(5, 5)
        assert Complex(5, 5).divide(b) == a
        assert a.times_scalar(2) == Complex(2, 4)
        assert a.divide_scalar(2) == Complex(0.5, 1)

    def test_operators_mix_with_builtins(self):
        z = Complex(1, 1)
        assert z * 2 == Complex(2, 2)
        assert 2 * z == Complex(2, 2)
        assert z + 1j == Complex(1, 2)
        assert 1 - z == Complex(0, -1)
        assert -z == Complex(-1, -1)
        assert abs(Complex(3, 4)) == 5.0
        assert complex(z) == 1 + 1j

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            Complex(1, 1).divide(Complex.zero())
        with pytest.raises(DivisionByZero):
            Complex(1, 1).divide_scalar(0)
        with pytest.raises(ZeroDivisionError):
            Complex.zero().inverse()
        with pytest.raises(DivisionByZero):
            Complex.zero().normalize()

    def test_power(self):
        i = Complex(0, 1)
        assert i.power(0) == Complex.one()
        assert i.power(1) == i
        assert i.power(2) == Complex(-1, 0)
        assert i.power(-1) == Complex(0, -1)
        assert Complex(1, 1) ** 3 == Complex(-2, 2)
        assert Complex(2, 0) ** -2 == Complex(0.25, 0)

    def test_inverse_conjugate_modulus(self):
        z = Complex(3, 4)
        assert z.inverse() == Complex(3 / 25, -4 / 25)
        assert z.conjugate() == Complex(3, -4)
        assert z.modulus() == 5.0
        assert z.normalize() == Complex(0.6, 0.8)
        assert z.times(z.inverse()) == Complex.one()

    def test_tolerant_equality(self):
        assert Complex(1, 0) == Complex(1 + 1e-12, -1e-12)
        assert Complex(1, 0) != Complex(1 + 1e-6, 0)
        assert Complex(0.5, 0) == 0.5

    def test_hash_consistent_for_equal_values(self):
        assert hash(Complex(1, 2)) == hash(Complex(1.0, 2.0))
        assert len({Complex(0.25, 0), Complex(0.25, 0)}) == 1

    def test_immutable(self):
        z = Complex(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            z.re = 3

    def test_from_polar(self):
        assert Complex.from_polar(2, math.pi / 2) == Complex(0, 2)
        assert Complex.from_polar(1, math.pi) == Complex(-1, 0)
        assert np.isclose(Complex.from_polar(3, 0.7).modulus(), 3.0)

    def test_str(self):
        assert str(Complex(1, -2)) == "1 - 2i"
        assert str(Complex(0.5, 0)) == "0.5 + 0i"


class TestMatrix:
    """Tests for the generic matrix, using the Real field."""

    def test_product(self):
        a = Matrix.from_rows([[1, 2], [3, 4]], Real)
        b = Matrix.from_rows([[5, 6], [7, 8]], Real)
        assert a @ b == Matrix.from_rows([[19, 22], [43, 50]], Real)

    def test_rectangular_product(self):
        a = Matrix.from_rows([[1, 2, 3]], Real)
        b = Matrix.from_rows([[1], [0], [2]], Real)
        result = a.times(b)
        assert (result.width, result.height) == (1, 1)
        assert result.get_cell(0, 0) == Real(7)

    def test_invalid_construction(self):
        with pytest.raises(InvalidDimension):
            Matrix(0, 2)
        with pytest.raises(InvalidDimension):
            Matrix(2, -1)
        with pytest.raises(InvalidDimension):
            Matrix.from_rows([])
        with pytest.raises(InvalidDimension):
            Matrix.from_rows([[1, 2], [3]])

    def test_default_cells_are_zero(self):
        m = Matrix(2, 3)
        assert m.shape == (3, 2)
        assert all(m.get_cell(x, y) == Complex.zero() for x in range(2) for y in range(3))

    def test_cell_access_is_bounds_checked(self):
        m = Matrix(2, 2, Real)
        m.set_cell(1, 0, 5)
        assert m.get_cell(1, 0) == Real(5)
        with pytest.raises(IndexOutOfRange):
            m.get_cell(2, 0)
        with pytest.raises(IndexOutOfRange):
            m.set_cell(0, -1, 1)
        with pytest.raises(MissingArgument):
            m.set_cell(0, 0, None)

    def test_shape_mismatch(self):
        a = Matrix(2, 2, Real)
        b = Matrix(3, 2, Real)
        with pytest.raises(DimensionMismatch):
            a.plus(b)
        with pytest.raises(DimensionMismatch):
            a.minus(b)
        with pytest.raises(DimensionMismatch):
            b.times(a)
        with pytest.raises(MissingArgument):
            a.plus(None)
        with pytest.raises(MissingArgument):
            a.times(None)

    def test_scalar_operations(self):
        m = Matrix.from_rows([[1, -2], [3, 4]], Real)
        assert m * 2 == Matrix.from_rows([[2, -4], [6, 8]], Real)
        assert m / 2 == Matrix.from_rows([[0.5, -1], [1.5, 2]], Real)
        assert -m == m.times_scalar(-1)
        assert m - m == Matrix(2, 2, Real)
        with pytest.raises(DivisionByZero):
            m.divide_scalar(0)

    def test_transpose(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]], Real)
        t = m.transpose()
        assert (t.width, t.height) == (2, 3)
        assert t.get_cell(1, 0) == m.get_cell(0, 1)
        assert t.transpose() == m

    def test_conjugate_transpose(self):
        assert Y.conjugate_transpose() == Y
        m = Matrix.from_rows([[1j, 2], [0, 1 - 1j]])
        assert m.conjugate_transpose() == Matrix.from_rows([[-1j, 0], [2, 1 + 1j]])

    def test_identity_and_square(self):
        assert Matrix.identity(2) == I2
        assert I2.is_square()
        assert not Matrix(2, 3).is_square()

    def test_numpy_round_trip_of_gate(self):
        assert np.allclose(H.to_numpy(), np.array([[1, 1], [1, -1]]) / np.sqrt(2))
        assert Matrix.from_numpy(H.to_numpy()) == H

    def test_gates_exported_from_core(self):
        import qreg.core

        assert qreg.core.X is X
        assert qreg.core.CNOT is CNOT
        assert {"I2", "X", "Y", "Z", "H", "CNOT", "SWAP"} <= set(qreg.core.__all__)

    def test_frozen_gates(self):
        assert X.frozen
        with pytest.raises(TypeError):
            X.set_cell(0, 0, 1)
        copy = X.copy()
        copy.set_cell(0, 0, 1)
        assert copy != X

    def test_columns_and_rows(self):
        m = Matrix.from_rows([[1, 2], [3, 4]], Real)
        assert m.column_vector(1) == Vector.from_values([2, 4], Orientation.COLUMN, Real)
        assert m.row_vector(1) == Vector.from_values([3, 4], Orientation.ROW, Real)
        with pytest.raises(IndexOutOfRange):
            m.column_vector(2)

    def test_str_is_boxed(self):
        text = str(I2)
        assert text.startswith("┌")
        assert text.splitlines()[-1].startswith("└")


class TestVector:
    """Tests for the vector wrapper."""

    def test_coordinates(self):
        v = Vector.from_values([1, 2, 3], Orientation.COLUMN, Real)
        assert v.length == 3
        assert len(v) == 3
        assert v[1] == Real(2)
        v[1] = 7
        assert v.get(1) == Real(7)
        assert v.as_matrix().get_cell(0, 1) == Real(7)
        with pytest.raises(IndexOutOfRange):
            v.get(3)

    def test_row_addressing(self):
        v = Vector(3, Orientation.ROW, Real)
        v.set(2, 4)
        assert v.as_matrix().get_cell(2, 0) == Real(4)
        assert (v.as_matrix().width, v.as_matrix().height) == (3, 1)

    def test_arithmetic_keeps_orientation(self):
        v = Vector.from_values([1, 2], Orientation.ROW, Real)
        w = Vector.from_values([3, 4], Orientation.ROW, Real)
        result = v + w
        assert isinstance(result, Vector)
        assert result.orientation is Orientation.ROW
        assert list(result) == [Real(4), Real(6)]
        assert (v * 3).orientation is Orientation.ROW
        assert (-v)[0] == Real(-1)

    def test_transpose_flips_orientation(self):
        v = Vector.from_values([1, 2], Orientation.COLUMN, Real)
        t = v.transpose()
        assert t.orientation is Orientation.ROW
        assert list(t) == list(v)
        assert v != t

    def test_matrix_vector_products(self):
        m = Matrix.from_rows([[1, 2], [3, 4]], Real)
        column = Vector.from_values([1, 1], Orientation.COLUMN, Real)
        row = Vector.from_values([1, 1], Orientation.ROW, Real)

        mv = m @ column
        assert isinstance(mv, Vector)
        assert list(mv) == [Real(3), Real(7)]

        vm = row @ m
        assert isinstance(vm, Vector)
        assert vm.orientation is Orientation.ROW
        assert list(vm) == [Real(4), Real(6)]

    def test_shape_mismatch(self):
        v = Vector.from_values([1, 2], Orientation.COLUMN, Real)
        w = Vector.from_values([1, 2, 3], Orientation.COLUMN, Real)
        with pytest.raises(DimensionMismatch):
            v.plus(w)


class TestQubit:
    """Tests for the standalone qubit."""

    def test_construction_checks_norm(self):
        q = Qubit(0.6, 0.8j)
        assert np.isclose(q.probability_zero(), 0.36)
        assert np.isclose(q.probability_one(), 0.64)
        with pytest.raises(InvalidState):
            Qubit(1, 1)
        with pytest.raises(MissingArgument):
            Qubit(None, 1)

    def test_norm_tolerance_is_configurable(self):
        loose = SimulatorConfig(norm_tolerance=0.2)
        Qubit(0.95, 0, config=loose)
        with pytest.raises(InvalidState):
            Qubit(0.95, 0)

    def test_apply(self):
        assert Qubit.zero().apply(X) == Qubit.one()
        assert Qubit.zero().apply(H) == Qubit.plus()
        assert Qubit.plus().apply(Z).apply(H) == Qubit.one()
        assert Qubit.zero().apply(np.array([[0, 1], [1, 0]])) == Qubit.one()

    def test_apply_accepts_rows_and_other_fields(self):
        assert Qubit.zero().apply([[0, 1], [1, 0]]) == Qubit.one()
        assert Qubit.zero().apply([[S, S], [S, -S]]) == Qubit.plus()
        assert Qubit.zero().apply(Matrix.from_rows([[0, 1], [1, 0]], Real)) == Qubit.one()

    def test_apply_matches_one_qubit_register(self):
        rng = np.random.default_rng(14)
        for _ in range(20):
            model = random_qubit(rng)
            gate = random_gate(1, rng)
            reg = QubitRegister.from_amplitudes([model.alpha, model.beta])
            assert reg.apply(gate, 0).qubit(0) == model.apply(gate)

    def test_apply_rejects_bad_gates(self):
        with pytest.raises(DimensionMismatch):
            Qubit.zero().apply(CNOT)
        with pytest.raises(DimensionMismatch):
            Qubit.zero().apply([[0, 1, 0], [1, 0, 0]])
        with pytest.raises(MissingArgument):
            Qubit.zero().apply(None)

    def test_random_draw_collapses_to_drawn_state(self):
        rng = np.random.default_rng(3)
        for _ in range(50):
            q = Qubit.plus()
            if q.random_draw(rng):
                assert q == Qubit.one()
            else:
                assert q == Qubit.zero()

    def test_random_draw_on_basis_state(self):
        rng = np.random.default_rng(0)
        assert not any(Qubit.zero().random_draw(rng) for _ in range(100))

    def test_random_draw_frequency(self):
        rng = np.random.default_rng(15)
        model = Qubit(math.sqrt(0.3), math.sqrt(0.7))
        trials = 2000
        ones = sum(model.copy().random_draw(rng) for _ in range(trials))
        assert abs(ones - trials * 0.7) <= 100

    def test_copy_is_independent(self):
        q = Qubit.zero()
        c = q.copy().apply(X)
        assert q == Qubit.zero()
        assert c == Qubit.one()


class TestQubitRegister:
    """Tests for the register engine."""

    def test_zero_state(self):
        reg = QubitRegister(3)
        assert reg.size() == 3
        assert reg.num_qubits == 3
        assert reg.dimension == 8
        assert reg.proba(0) == 1.0
        assert all(reg.proba(i) == 0.0 for i in range(1, 8))

    def test_size_uses_exact_bit_length(self):
        assert QubitRegister(16).size() == 16

    def test_invalid_construction(self):
        with pytest.raises(InvalidDimension):
            QubitRegister(0)
        with pytest.raises(InvalidDimension):
            QubitRegister.from_amplitudes([1, 0, 0])
        with pytest.raises(InvalidDimension):
            QubitRegister.from_amplitudes([1])
        with pytest.raises(InvalidState):
            QubitRegister.from_amplitudes([1, 1])
        with pytest.raises(MissingArgument):
            QubitRegister.from_amplitudes(None)

    def test_max_dense_qubits(self):
        config = SimulatorConfig(max_dense_qubits=4)
        with pytest.raises(InvalidDimension):
            QubitRegister(5, config=config)
        with pytest.raises(InvalidDimension):
            QubitRegister.from_amplitudes(np.eye(32)[0], config=config)

    def test_from_amplitudes_accepts_complex_and_vectors(self):
        values = [Complex(S, 0), Complex(0, S)]
        a = QubitRegister.from_amplitudes(values)
        b = QubitRegister.from_amplitudes(Vector.from_values(values))
        c = QubitRegister.from_amplitudes(np.array([S, 1j * S]))
        assert a == b == c
        assert a.amplitude(1) == Complex(0, S)

    def test_from_amplitudes_copies_input(self):
        values = np.array([1, 0, 0, 0], dtype=np.complex128)
        reg = QubitRegister.from_amplitudes(values)
        values[0] = 0
        assert reg.proba(0) == 1.0

    def test_proba_bounds(self):
        reg = QubitRegister(2)
        with pytest.raises(IndexOutOfRange):
            reg.proba(4)
        with pytest.raises(IndexOutOfRange):
            reg.proba(-1)

    def test_bit_order(self):
        assert QubitRegister(2).apply(X, 0).proba(1) == 1.0
        assert QubitRegister(2).apply(X, 1).proba(2) == 1.0
        assert QubitRegister(3).apply(X, 2).proba(4) == 1.0

    def test_hadamard_then_cnot(self):
        reg = QubitRegister.from_amplitudes([1, 0, 0, 0])
        reg.apply(H, 1)
        assert np.allclose(reg.as_numpy(), [S, 0, S, 0])
        reg.apply(CNOT, 0, 1)
        assert np.allclose(reg.as_numpy(), [S, 0, 0, S])
        assert np.isclose(reg.proba(0), 0.5)
        assert np.isclose(reg.proba(3), 0.5)
        assert reg.proba(1) == 0.0
        assert reg.proba(2) == 0.0

    def test_non_contiguous_two_qubit_gate(self):
        # control is qubit 2, target qubit 0: |100> -> |101>
        assert QubitRegister(3).apply(X, 2).apply(CNOT, 0, 2).proba(5) == 1.0
        # control clear: |001> unchanged
        assert QubitRegister(3).apply(X, 0).apply(CNOT, 0, 2).proba(1) == 1.0
        # SWAP exchanges the outer qubits and leaves the middle one alone
        assert QubitRegister(3).apply(X, 0).apply(SWAP, 0, 2).proba(4) == 1.0
        assert QubitRegister(3).apply(X, 1).apply(SWAP, 0, 2).proba(2) == 1.0

    def test_indices_as_sequence(self):
        a = QubitRegister(2).apply(H, 1).apply(CNOT, [0, 1])
        b = QubitRegister(2).apply(H, 1).apply(CNOT, 0, 1)
        c = QubitRegister(2).apply(H, 1).apply(CNOT, np.array([0, 1]))
        assert a == b == c

    @pytest.mark.parametrize("qubits", [(0, 2), (1, 3), (0, 3), (0, 1), (2, 3)])
    def test_two_qubit_gate_matches_reference(self, qubits):
        rng = np.random.default_rng(11)
        reg = random_register(4, rng)
        u = random_unitary(4, rng)
        expected = tensor_product_reference(reg, u, qubits)
        reg.apply(u, *qubits)
        assert np.allclose(reg.as_numpy(), expected, atol=1e-12)

    @pytest.mark.parametrize("qubits", [(0, 2, 3), (0, 1, 4), (1, 3, 4), (0, 1, 2)])
    def test_three_qubit_gate_matches_reference(self, qubits):
        rng = np.random.default_rng(5)
        reg = random_register(5, rng)
        u = random_unitary(8, rng)
        expected = tensor_product_reference(reg, u, qubits)
        reg.apply(u, *qubits)
        assert np.allclose(reg.as_numpy(), expected, atol=1e-12)

    def test_general_path_matches_single_qubit_path(self):
        rng = np.random.default_rng(21)
        reg = random_register(4, rng)
        u = random_unitary(2, rng)
        for i in range(4):
            single = reg.copy().apply_single(u, i)
            general = reg.copy().apply_multi(u, [i])
            assert single == general

    def test_single_qubit_gate_matches_kron(self):
        rng = np.random.default_rng(8)
        reg = random_register(2, rng)
        u = random_unitary(2, rng)
        assert np.allclose(embed_operator(u, (0,), 2), np.kron(np.eye(2), u))
        assert np.allclose(embed_operator(u, (1,), 2), np.kron(u, np.eye(2)))
        expected = np.kron(u, np.eye(2)) @ reg.as_numpy()
        assert np.allclose(reg.apply(u, 1).as_numpy(), expected)

    def test_gate_validation(self):
        reg = QubitRegister(2)
        with pytest.raises(DimensionMismatch):
            reg.apply(CNOT, 0)
        with pytest.raises(IndexOutOfRange):
            reg.apply(X, 2)
        with pytest.raises(IndexOutOfRange):
            reg.apply(X, -1)
        with pytest.raises(DuplicateIndex):
            reg.apply(CNOT, 0, 0)
        with pytest.raises(IndexOutOfRange):
            reg.apply(CNOT, 1, 0)
        with pytest.raises(DimensionMismatch):
            reg.apply(X, 0, 1)
        with pytest.raises(InvalidDimension):
            reg.apply(np.eye(3), 0, 1)
        with pytest.raises(DimensionMismatch):
            reg.apply(np.eye(8), 0, 1, 2)
        with pytest.raises(DimensionMismatch):
            reg.apply(np.ones(4), 0, 1)
        with pytest.raises(MissingArgument):
            reg.apply(X)
        with pytest.raises(MissingArgument):
            reg.apply(None, 0)

    def test_failed_calls_leave_state_untouched(self):
        rng = np.random.default_rng(2)
        reg = random_register(3, rng)
        before = reg.as_numpy()
        bad_calls = [
            lambda: reg.apply(CNOT, 0),
            lambda: reg.apply(X, 3),
            lambda: reg.apply(CNOT, 2, 2),
            lambda: reg.apply(CNOT, 2, 1),
            lambda: reg.apply(np.eye(8), 0, 1),
        ]
        for call in bad_calls:
            with pytest.raises(QregError):
                call()
            assert np.array_equal(reg.as_numpy(), before)

    def test_copy_is_independent(self):
        rng = np.random.default_rng(4)
        original = random_register(3, rng)
        before = original.as_numpy()
        clone = original.copy()
        clone.apply(H, 0).apply(CNOT, 1, 2)
        clone.random_draw(rng)
        assert np.array_equal(original.as_numpy(), before)

    def test_random_draw_on_basis_state(self):
        rng = np.random.default_rng(9)
        reg = QubitRegister(2).apply(X, 1)
        assert reg.random_draw(rng) == (True, False)
        assert reg.proba(2) == 1.0

    def test_random_draw_collapses(self):
        rng = np.random.default_rng(10)
        reg = random_register(3, rng)
        bits = reg.random_draw(rng)
        index = int("".join("1" if b else "0" for b in bits), 2)
        assert reg.proba(index) == 1.0
        assert np.isclose(reg.norm(), 1.0)

    def test_random_draw_clamps_to_last_index(self):
        amplitude = math.sqrt(0.49975)
        reg = QubitRegister.from_amplitudes([amplitude, amplitude])
        assert reg.random_draw(FixedDraw(0.9998)) == (True,)
        assert reg.proba(1) == 1.0

    def test_random_draw_at_zero_skips_empty_states(self):
        assert QubitRegister(1).apply(X, 0).random_draw(FixedDraw(0.0)) == (True,)
        reg = QubitRegister(2).apply(X, 1)
        assert reg.random_draw(FixedDraw(0.0)) == (True, False)
        assert reg.proba(2) == 1.0
        assert QubitRegister(1).random_draw(FixedDraw(0.0)) == (False,)

    def test_random_draw_needs_generator(self):
        with pytest.raises(MissingArgument):
            QubitRegister(1).random_draw(None)

    def test_random_draw_qubits_does_not_collapse(self):
        rng = np.random.default_rng(12)
        reg = QubitRegister(2).apply(X, 0)
        assert reg.random_draw_qubits(rng) == (False, True)
        assert reg.proba(1) == 1.0

    def test_qubit_marginal(self):
        reg = QubitRegister(2).apply(H, 0)
        assert reg.qubit(0) == Qubit.plus()
        assert reg.qubit(1) == Qubit.zero()
        with pytest.raises(IndexOutOfRange):
            reg.qubit(2)

    def test_qubit_marginal_without_separable_state(self):
        reg = QubitRegister(2).apply(H, 0).apply(Z, 0)
        with pytest.raises(InvalidState):
            reg.qubit(1)

    def test_equality_is_tolerant(self):
        a = QubitRegister.from_amplitudes([S, S])
        b = QubitRegister.from_amplitudes([S + 1e-12, S])
        c = QubitRegister.from_amplitudes([S + 1e-6, S])
        assert a == b
        assert a != c
        assert a != QubitRegister(2)

    def test_rendering(self):
        reg = QubitRegister(2)
        text = str(reg)
        assert len(text.splitlines()) == 4
        assert "1 + 0i" in text
        assert "num_qubits=2" in repr(reg)

    def test_amplitudes_snapshot(self):
        reg = QubitRegister(1).apply(H, 0)
        amplitudes = reg.amplitudes
        assert amplitudes.orientation is Orientation.COLUMN
        assert amplitudes[1] == Complex(S, 0)
        amplitudes[1] = Complex(0, 0)
        assert np.isclose(reg.proba(1), 0.5)

    def test_measurement_is_logged(self, caplog):
        rng = np.random.default_rng(1)
        with caplog.at_level(logging.DEBUG, logger="qreg.core.register"):
            QubitRegister(2).random_draw(rng)
        assert "Measured basis state 0" in caplog.text


class TestSimulatorConfig:
    """Tests for configuration."""

    def test_defaults(self):
        config = SimulatorConfig()
        assert config.equality_tolerance == 1e-9
        assert config.norm_tolerance == 1e-3
        assert config.is_unit_norm(0.9995)
        assert not config.is_unit_norm(0.99)

    def test_overrides(self):
        config = SimulatorConfig().with_overrides(norm_tolerance=0.1)
        assert config.norm_tolerance == 0.1
        assert config.equality_tolerance == 1e-9

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            SimulatorConfig(norm_tolerance=0)
        with pytest.raises(ValueError):
            SimulatorConfig(max_dense_qubits=0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
