"""Curriculum project parser.

Extracts structured metadata (title, summary, learning objectives and a
thumbnail) from a single curriculum project directory.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
