"""
Test: Equivalent resistance between two nodes.

Results are exact rational expressions: numeric networks give exact
values, symbolic networks give simplified expressions.
"""
import pytest


def _two_terminal():
    from pyohm.dc import Circuit

    circuit = Circuit()
    circuit, a = circuit.node("a")
    circuit, b = circuit.node("b")
    return circuit, a, b


def test_series_numeric():
    """10 + 20 = 30"""
    from pyohm.dc import Series, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = Series(circuit, a, b, [10, 20])

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert str(r_eq) == "30", f"Expected 30, got {r_eq}"


def test_parallel_numeric_is_exact():
    """10 || 20 = 20/3, kept exact and shown as a decimal."""
    from pyohm.dc import Parallel, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = Parallel(circuit, a, b, [10, 20])

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert str(r_eq) == "6.666666667", f"Expected 20/3, got {r_eq}"
    assert abs(r_eq.to_number() - 20 / 3) < 1e-12


def test_series_symbolic():
    """r + 2r = 3r"""
    from pyohm.dc import Series, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = Series(circuit, a, b, ["r", "2r"])

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert str(r_eq) == "3r", f"Expected 3r, got {r_eq}"


def test_parallel_symbolic():
    """r || r = r/2"""
    from pyohm.dc import Parallel, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = Parallel(circuit, a, b, ["r", "r"])

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert str(r_eq) == "r/2", f"Expected r/2, got {r_eq}"


def test_balanced_wheatstone_bridge():
    """Equal arms: no bridge current, R = 10."""
    from pyohm.dc import WheatstoneBridge, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = WheatstoneBridge(circuit, a, b, [10] * 5)

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert str(r_eq) == "10", f"Expected 10, got {r_eq}"


def test_unbalanced_wheatstone_bridge():
    """
    Arms 1, 2, 3, 4 with a 5 ohm bridge:
        R = [R0 R1 (R2+R3) + R2 R3 (R0+R1) + R4 (R0+R2)(R1+R3)]
            / [(R0+R1)(R2+R3) + R4 (R0+R1+R2+R3)]
          = 170/71
    """
    from pyohm.dc import WheatstoneBridge, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = WheatstoneBridge(circuit, a, b, [1, 2, 3, 4, 5])

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert abs(r_eq.to_number() - 170 / 71) < 1e-12, f"Expected 170/71, got {r_eq}"
    assert str(r_eq) == "2.394366197"


def test_symbolic_balanced_bridge():
    from pyohm.dc import WheatstoneBridge, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = WheatstoneBridge(circuit, a, b, ["r"] * 5)

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert r_eq == "r", f"Expected r, got {r_eq}"


def test_same_node_is_zero():
    from pyohm.dc import calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    assert calculate_equivalent_resistance(circuit, "a", "a").is_zero()


def test_unknown_node_is_none():
    from pyohm.dc import calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    assert calculate_equivalent_resistance(circuit, "a", "zz") is None
    assert calculate_equivalent_resistance(circuit, "zz", "a") is None


def test_disconnected_is_infinite():
    from pyohm.dc import calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert r_eq.is_infinity()
    assert r_eq.to_display_string() == "∞"


def test_open_edge_is_infinite():
    from pyohm.dc import Open, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = Open(circuit, a, b, name="gap")

    assert calculate_equivalent_resistance(circuit, "a", "b").is_infinity()


def test_shorted_terminals_are_zero():
    """A short in parallel with a resistor wins."""
    from pyohm.dc import R, Short, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = R(circuit, a, b, name="R1", value=100)
    circuit, _ = Short(circuit, a, b, name="W")

    assert calculate_equivalent_resistance(circuit, "a", "b").is_zero()


def test_short_inside_series_chain():
    """a -10- m, m -short- n, n -20- b  ->  30"""
    from pyohm.dc import R, Short, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, m = circuit.node("m")
    circuit, n = circuit.node("n")
    circuit, _ = R(circuit, a, m, name="R1", value=10)
    circuit, _ = Short(circuit, m, n, name="W")
    circuit, _ = R(circuit, n, b, name="R2", value=20)

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert r_eq == 30, f"Expected 30, got {r_eq}"


def test_dangling_and_isolated_nodes_ignored():
    """Nodes that carry no current do not change the result."""
    from pyohm.dc import R, Open, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, c = circuit.node("c")
    circuit, d = circuit.node("d")
    circuit, _ = circuit.node("lonely")
    circuit, _ = R(circuit, a, b, name="R1", value=10)
    circuit, _ = Open(circuit, b, c, name="gap")
    circuit, _ = R(circuit, a, d, name="stub", value=5)

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert r_eq == 10, f"Expected 10, got {r_eq}"


def test_symmetric_in_terminals():
    from pyohm.dc import WheatstoneBridge, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = WheatstoneBridge(circuit, a, b, [1, 2, 3, 4, 5])

    forward = calculate_equivalent_resistance(circuit, "a", "b")
    backward = calculate_equivalent_resistance(circuit, "b", "a")
    assert forward == backward


@pytest.mark.parametrize(
    "values,expected",
    [
        ([10, 10], 5),
        ([6, 3], 2),
        ([4, 4, 2], 1),
    ],
)
def test_parallel_table(values, expected):
    from pyohm.dc import Parallel, calculate_equivalent_resistance

    circuit, a, b = _two_terminal()
    circuit, _ = Parallel(circuit, a, b, values)

    r_eq = calculate_equivalent_resistance(circuit, "a", "b")
    assert r_eq == expected, f"{values}: expected {expected}, got {r_eq}"
