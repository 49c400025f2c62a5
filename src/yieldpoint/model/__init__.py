"""
The MODEL layer contains pure data structures and the stress-strain physics.
It has NO knowledge of the GUI (Qt).
"""
