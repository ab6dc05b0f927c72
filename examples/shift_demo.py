"""
Walk through three shift plans on a 38/30 x 28/23/19/16 drivetrain.

Changes the target ratio and starting gear between queries on the same
calculator, printing the closest combination and the shifts to reach it.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cogshift.calculator import GearRatioCalculator, to_summary

front_cogs = [38, 30]
rear_cogs = [28, 23, 19, 16]

calc = GearRatioCalculator(front_cogs, rear_cogs, ratio=1.6)


def show():
    print(to_summary(calc.find_closest_combination(), calc.generate_shift_sequence()))
    print("-" * 52)


# Case 1: ratio 1.6 from F:38 R:28
calc.set_initial_combination(38, 28)
show()

# Case 2: ratio 1.4, same start (already the closest gear)
calc.set_target_ratio(1.4)
show()

# Case 3: ratio 1.2 from F:38 R:23
calc.set_target_ratio(1.2)
calc.set_initial_combination(38, 23)
show()
