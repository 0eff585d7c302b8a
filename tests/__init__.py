"""Test suite for breathwork.

Test Structure:
- unit/sequencer/: Phase models, pure transitions, PhaseSequencer, timeline
- unit/config/: Config models and loaders
- unit/utils/: JSON and logging helpers
- unit/cli/: Command-line parsing and commands
- unit/test_driver.py, unit/test_guidance.py: Tick driver and presentation policy
- conftest.py: Shared fixtures
"""
