# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict


class Customer(TypedDict):
    id: int
    name: str


class ProjectTask(TypedDict):
    id: int
    name: str
    active: bool
    billable: NotRequired[bool]


class Project(TypedDict):
    id: int
    name: str
    identifier: NotRequired[Optional[str]]
    active: NotRequired[bool]
    customer: Customer
    tasks: list[ProjectTask]
