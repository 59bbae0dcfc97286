"""
Example: Wheatstone Bridge

A bridge cannot be reduced by series/parallel rules alone; nodal analysis
handles it directly.

Three examples:
1. Balanced bridge: no current through the bridge resistor
2. Unbalanced bridge: exact equivalent resistance and bridge current
3. Symbolic bridge with equal arms r

Components used: WheatstoneBridge
"""
from pyohm.dc import (
    Circuit,
    WheatstoneBridge,
    calculate_equivalent_resistance,
    analyze_currents,
    current_direction,
)


def build_bridge(values, v_top=None):
    """Build a bridge between 'top' and 'bottom'.

    Circuit:
                 ┌──[R0]──(left)──[R2]──┐
            top ─┤           │          ├─ bottom
                 │         [R4]         │
                 └──[R1]──(right)─[R3]──┘
    """
    circuit = Circuit()
    circuit, top = circuit.node("top", potential=v_top)
    circuit, bottom = circuit.node("bottom", potential=0 if v_top is not None else None)
    circuit, (edges, _) = WheatstoneBridge(circuit, top, bottom, values)
    return circuit, edges


def report(title, values):
    print(f"\n{title}")
    print("-" * 40)
    circuit, edges = build_bridge(values)
    r_eq = calculate_equivalent_resistance(circuit, "top", "bottom")
    print(f"   R_eq = {r_eq.to_display_string(' Ohm')}")

    circuit, edges = build_bridge(values, v_top=10)
    currents = analyze_currents(circuit).currents
    for edge in edges:
        current = currents[edge.id]
        direction = current_direction(edge, current)
        print(f"   {edge.id}: {current.to_display_string('A'):>12}  ({direction})")


def main():
    print("=" * 60)
    print("Wheatstone Bridge Example")
    print("=" * 60)

    report("1. Balanced Bridge (all 10 Ohm)", [10] * 5)
    report("2. Unbalanced Bridge (1, 2, 3, 4, bridge 5)", [1, 2, 3, 4, 5])
    report("3. Symbolic Bridge (all r)", ["r"] * 5)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
