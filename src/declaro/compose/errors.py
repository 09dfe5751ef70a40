#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations


class CompositionError(RuntimeError):
    """Composition failed; no document was produced."""


class InvalidImageData(CompositionError):
    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"invalid image data for {field}: {reason}")


class RunawayPagination(CompositionError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"document exceeds {limit} pages; the declaration text looks malformed"
        )


class InsufficientContentArea(CompositionError):
    def __init__(self, available_mm: float, required_mm: float) -> None:
        self.available_mm = available_mm
        self.required_mm = required_mm
        super().__init__(
            f"header and footer leave {available_mm:.1f} mm of content area; "
            f"at least {required_mm:.1f} mm is required"
        )
