"""
Feature modules.

Each feature is self-contained:
- track: cumulative distance, markers, loop detection
- map: zoom-adaptive decoration density
- profile: chart downsampling and slope profiles
- overlay: composition of the above for one redraw
"""
