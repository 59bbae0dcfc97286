"""
Example: Voltage Divider

Demonstrates the voltage divider rule: V_out = V_in * R2 / (R1 + R2)

Three examples:
1. Numeric 2-resistor divider, solved exactly
2. Symbolic divider: V_out as an expression in V, r1 and r2
3. 4-resistor chain divider showing multiple tap points

Components used: R
"""
from jax import grad
from pyohm.dc import Circuit, R, Series, analyze_currents
from pyohm.symbolic import compile_expression


def build_simple_divider(v_in, r1, r2):
    """Build a simple 2-resistor voltage divider.

    Circuit:
        top ---[R1]---+---[R2]--- bottom (0 V)
                      |
                     mid
    """
    circuit = Circuit()
    circuit, n_top = circuit.node("top", potential=v_in)
    circuit, n_mid = circuit.node("mid")
    circuit, n_bottom = circuit.node("bottom", potential=0)

    circuit, _ = R(circuit, n_top, n_mid, name="R1", value=r1)
    circuit, _ = R(circuit, n_mid, n_bottom, name="R2", value=r2)
    return circuit


def build_chain_divider(v_in, r_val):
    """Build a 4-resistor chain divider with multiple taps.

    Circuit:
        top ---[R0]---+---[R1]---+---[R2]---+---[R3]--- bottom
                      |          |          |
                    tap1       tap2       tap3
    """
    circuit = Circuit()
    circuit, n_top = circuit.node("top", potential=v_in)
    circuit, n_bottom = circuit.node("bottom", potential=0)
    circuit, _ = Series(circuit, n_top, n_bottom, [r_val] * 4, prefix="tap")
    return circuit


def main():
    print("=" * 60)
    print("Voltage Divider Example")
    print("=" * 60)

    # Numeric divider
    print("\n1. Numeric Divider (R1=10k, R2=20k)")
    print("-" * 40)
    solution = analyze_currents(build_simple_divider(10, 10000, 20000))
    print(f"   Output voltage:   {solution.potentials['mid'].to_display_string('V')}")
    print(f"   Current:          {solution.currents['R1'].to_display_string('A')}")

    # Symbolic divider
    print("\n2. Symbolic Divider")
    print("-" * 40)
    solution = analyze_currents(build_simple_divider("V", "r1", "r2"))
    v_out = solution.potentials["mid"]
    print(f"   V_out = {v_out}")
    print(f"   I     = {solution.currents['R1']}")

    compiled = compile_expression(v_out, defaults={"V": 10.0, "r1": 10000.0, "r2": 10000.0})
    print(f"   V_out at V=10, r1=r2=10k: {float(compiled.evaluate()):.4f} V")

    # Chain divider
    print("\n3. 4-Resistor Chain (equal 10k resistors)")
    print("-" * 40)
    potentials = analyze_currents(build_chain_divider(10, 10000)).potentials
    for i in (1, 2, 3):
        print(f"   Tap {i}: {potentials[f'tap_mid{i}'].to_display_string('V')}")

    # Differentiability demo
    print("\n4. JAX Differentiability")
    print("-" * 40)
    dVout_dR2 = grad(lambda r2: compiled.evaluate({"r2": r2}))
    gradient = float(dVout_dR2(10000.0))

    # dVout/dR2 = Vin * R1 / (R1+R2)^2
    analytical = 10.0 * 10000.0 / (20000.0) ** 2
    print(f"   dVout/dR2 (JAX):      {gradient:.10f}")
    print(f"   dVout/dR2 (analytic): {analytical:.10f}")
    print(f"   Match: {'Yes' if abs(gradient - analytical) < 1e-8 else 'No'}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
