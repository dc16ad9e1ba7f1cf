"""
schellingsim: Schelling's model of segregation on a toroidal grid

Agents of two types are randomly placed on a square grid. During each time
step every agent decides whether it is happy based on the types of its eight
neighbors. Unhappy agents move to a random empty cell.

Core concepts:
- The grid wraps around at its edges (no edge effects)
- Happiness = share of alike occupied neighbors >= alike_preference
- An agent without occupied neighbors is always happy
- The happy fraction is recorded once per step
"""

__version__ = "0.1.0"
