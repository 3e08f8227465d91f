"""
Temperature conversion example - three scales kept in sync.

Kelvin, Celsius and Fahrenheit are linked by two soft constraints:
    F = 1.8 C + 32
    K = C + 273
Assigning any one scale relaxes the other two through Celsius.
"""

from auto_constraint import AutomaticConstraintCluster, RealVariable


def main():
    print("=" * 60)
    print("TEMPERATURE CONVERSION")
    print("=" * 60)

    cluster = AutomaticConstraintCluster()

    kelvin = RealVariable(0)
    celsius = RealVariable(0)
    fahrenheit = RealVariable(0)

    cluster.add_variable('kelvin', kelvin)
    cluster.add_variable('fahrenheit', fahrenheit)
    cluster.add_variable('celsius', celsius)

    cluster.add_constraint('fahrenheit', 'celsius', lambda f, c: abs(1.8 * c + 32 - f))
    cluster.add_constraint('kelvin', 'celsius', lambda k, c: abs(k - 273 - c))

    for name, value in [('fahrenheit', 32), ('celsius', 100), ('kelvin', 0)]:
        result = cluster.set_value(name, value)

        print(f"\nSet {name} = {value}")
        if not result:
            print(f"  Failed: {result.message}")
            continue

        print(f"  {kelvin.value:.2f}K = {celsius.value:.2f}C = {fahrenheit.value:.2f}F")
        steps = ', '.join(f"{a}->{b}: {n}" for (a, b), n in result.steps.items())
        print(f"  Descent steps: {steps}")


if __name__ == '__main__':
    main()
