"""
Durable-state primitives for tick-driven agent code.

This package holds the small building blocks (tick clock, persisted memory, record
contracts) that the systems in `colony.systems` read and write between ticks.
"""
