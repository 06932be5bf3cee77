# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Parser domains.

- project: README/metadata extraction pipeline for a project directory
"""
