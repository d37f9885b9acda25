"""AuditionPrep: LilyPond audition packets for youth orchestra auditions."""

__version__ = "0.1.0"
