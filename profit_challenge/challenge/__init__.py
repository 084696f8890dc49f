"""Progress-calculation engine for a daily profit challenge.

The engine is a set of pure functions over a snapshot list plus a goal config:
- normalize: chronological order + realized profit per entry
- projector: projected-vs-actual series, one point per calendar day
- weekly: Monday-anchored weekly goal attainment
- heatmap: per-day profit/loss classification for calendar display

Everything is recomputed from the full snapshot list after every mutation.
"""
