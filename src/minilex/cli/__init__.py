# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for minilex."""
