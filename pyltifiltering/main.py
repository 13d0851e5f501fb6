"""
Demonstration run of the FIR and IIR filters.

    python -m pyltifiltering.main
"""

import logging

from pyltifiltering import FIR, IIR, FilterError, format_signal


def run_demo():
    """Prints FIR/IIR outputs, getters and stability for a few small filters."""

    print("--- FIR filter test ---")

    fir_test1 = FIR([1.5, 2.0, 3.5])
    print("Test Getter x: " + format_signal(fir_test1.x))
    print("Test Getter h: " + format_signal(fir_test1.h))
    print("Test FIR filtration - first constructor: " + format_signal(fir_test1.out_signal()))

    fir_test2 = FIR([1, 2, 3], [3, 2, 1], dtype=int)
    print("Test FIR filtration - second constructor: " + format_signal(fir_test2.out_signal()))
    fir_test2.x = [2, 1, 3, 7]
    fir_test2.h = [7, 3, 1, 2]
    print("Test FIR filtration - setters: " + format_signal(fir_test2.out_signal()))

    print("--- IIR filter test ---")

    iir_test1 = IIR()
    print("Test IIR filtration - first constructor: "
          + format_signal(iir_test1.filter_signal([1.5, 2.0, -1.0])))
    iir_test1.b = [0.5, 1, 0, -0.5]
    iir_test1.a = [2.0, -1, 1]
    iir_test1.output_length = 2
    print("Test IIR filtration - setters: " + format_signal(iir_test1.filter_signal([1, 0, 1])))
    iir_test1.output_length = 5
    print("Test filter stability: " + iir_test1.stability().message)
    print("Test Getter B: " + format_signal(iir_test1.b))
    print("Test Getter A: " + format_signal(iir_test1.a))
    print("Test Getter L: " + str(iir_test1.output_length))

    iir_test2 = IIR([2, 0, -1, 1], [1, 1, 2])
    print("Test IIR filtration - second constructor: "
          + format_signal(iir_test2.filter_signal([1, 0, -1])))
    print("Test filter stability: " + iir_test2.stability().message)

    print("Test exceptions: ")
    for attempt in (
        lambda: IIR([1, 1], [0, 1]),
        lambda: setattr(iir_test2, "a", []),
        lambda: setattr(iir_test1, "output_length", -1),
    ):
        try:
            attempt()
        except FilterError as e:
            print(f"Error: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_demo()
