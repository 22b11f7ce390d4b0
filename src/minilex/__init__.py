# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""minilex: lexical analyzer for a small expression language."""

__version__ = "0.1.0"
