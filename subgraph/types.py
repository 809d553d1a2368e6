# Copyright 2019-2025 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from pydantic_forms.types import strEnum

__all__ = [
    "strEnum",
    "CustomerStatus",
]


class CustomerStatus(strEnum):
    """Well known customer statuses.

    The `status` of a customer is published as a plain string, so values outside of this enum are valid as well.
    """

    ACTIVE = "ACTIVE"
    ON_HOLD = "ON_HOLD"
