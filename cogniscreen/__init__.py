"""CogniScreen core.

Educational cognitive-health screening engine: adaptive symptom
questionnaire, mini-game scoring, domain aggregation and risk
classification with recommendations.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
