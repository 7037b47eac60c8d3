# __init__.py -- The refnames package
# Copyright (C) 2026 The refnames developers
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# refnames is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Validation and normalization of git ref names."""

__version__ = (0, 1, 0)

__all__ = [
    "PlatformMode",
    "RefFormatError",
    "__version__",
    "check_ref_name",
    "is_valid_ref_name",
    "normalize_branch_name",
]

from .errors import RefFormatError
from .normalize import normalize_branch_name
from .platform import PlatformMode
from .refs import check_ref_name, is_valid_ref_name
