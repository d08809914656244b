# SPDX-License-Identifier: MIT

from typing import TypedDict


class User(TypedDict):
    id: int
    firstname: str
    lastname: str


class Employment(TypedDict):
    id: int
    user: User
