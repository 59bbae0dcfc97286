"""
Test: Symbolic results cross-checked against SymPy.

SymPy solves the same nodal equations independently; both answers are
evaluated at a few resistor values and compared.
"""
import pytest

sympy = pytest.importorskip("sympy")


def _sympy_bridge_resistance():
    """Closed form of the five-resistor bridge by nodal analysis with a unit current."""
    r0, r1, r2, r3, r4 = sympy.symbols("r0 r1 r2 r3 r4", positive=True)
    vt, vl, vr = sympy.symbols("vt vl vr")
    equations = [
        sympy.Eq((vt - vl) / r0 + (vt - vr) / r1, 1),
        sympy.Eq((vl - vt) / r0 + vl / r2 + (vl - vr) / r4, 0),
        sympy.Eq((vr - vt) / r1 + vr / r3 + (vr - vl) / r4, 0),
    ]
    solution = sympy.solve(equations, [vt, vl, vr], dict=True)[0]
    return sympy.simplify(solution[vt]), (r0, r1, r2, r3, r4)


@pytest.mark.parametrize(
    "values",
    [
        (1.0, 2.0, 3.0, 4.0, 5.0),
        (10.0, 10.0, 10.0, 10.0, 10.0),
        (100.0, 220.0, 330.0, 470.0, 1000.0),
    ],
)
def test_bridge_matches_sympy(values):
    from pyohm.dc import Circuit, WheatstoneBridge, calculate_equivalent_resistance

    circuit = Circuit()
    circuit, top = circuit.node("top")
    circuit, bottom = circuit.node("bottom")
    circuit, _ = WheatstoneBridge(circuit, top, bottom, ["r0", "r1", "r2", "r3", "r4"])

    r_eq = calculate_equivalent_resistance(circuit, "top", "bottom")
    assert r_eq.get_variables() == {"r0", "r1", "r2", "r3", "r4"}

    expected_expr, symbols = _sympy_bridge_resistance()
    expected = float(expected_expr.subs(dict(zip(symbols, values))))

    ours = r_eq.evaluate(dict(zip(["r0", "r1", "r2", "r3", "r4"], values)))
    assert ours == pytest.approx(expected, rel=1e-9), f"Expected {expected}, got {ours}"


def test_ladder_matches_sympy():
    """Three-rung ladder with symbolic r: compare the simplified ratio."""
    from pyohm.dc import Circuit, R, calculate_equivalent_resistance

    circuit = Circuit()
    circuit, a = circuit.node("a")
    circuit, gnd = circuit.node("gnd")
    prev = a
    for i in range(3):
        circuit, nxt = circuit.node(f"n{i}")
        circuit, _ = R(circuit, prev, nxt, name=f"S{i}", value="r")
        circuit, _ = R(circuit, nxt, gnd, name=f"P{i}", value="r")
        prev = nxt

    r_eq = calculate_equivalent_resistance(circuit, "a", "gnd")

    # Fold from the far end: each rung is P || (S + rest)
    r = sympy.symbols("r", positive=True)
    tail = r
    for _ in range(2):
        tail = r * (r + tail) / (2 * r + tail)
    expected = sympy.simplify(r + tail)

    for value in (1.0, 2.5, 47.0):
        ours = r_eq.evaluate({"r": value})
        theirs = float(expected.subs(r, value))
        assert ours == pytest.approx(theirs, rel=1e-9), f"r={value}: {ours} vs {theirs}"
