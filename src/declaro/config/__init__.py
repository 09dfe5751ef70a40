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

"""Layout config loaders and installers."""

from .installer import (
    DEFAULT_LAYOUTS_PATH,
    LAYOUTS_ENV,
    init_user_config,
    resolve_layouts_path,
    user_config_needs_init,
    user_layouts_path,
)
from .loader import (
    DEFAULT_LAYOUT_KEY,
    LayoutsFile,
    NamedLayout,
    load_layout_config,
    load_layouts,
)

__all__ = [
    "DEFAULT_LAYOUTS_PATH",
    "DEFAULT_LAYOUT_KEY",
    "LAYOUTS_ENV",
    "LayoutsFile",
    "NamedLayout",
    "init_user_config",
    "load_layout_config",
    "load_layouts",
    "resolve_layouts_path",
    "user_config_needs_init",
    "user_layouts_path",
]
