# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for SharpName documentation."""

project = "SharpName"
author = "SharpName Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
