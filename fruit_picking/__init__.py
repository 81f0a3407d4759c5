"""
Fruit Picking Package
=====================

Simulation of fruit collection. Pickers collect fruit in picking order while
two rules act on what they collect:

- Contact spoilage between a new fruit and the one picked before it
- Worm infestation spreading back to fruit picked since the last wormy one

Pickers are ranked by how healthy, sweet and large their harvest is, and
rankings can be merged.

Display labels and random harvest parameters live in picking_config.yaml.
"""
