"""Users of the Lever account (recruiters, hiring managers, interviewers)."""

from dataclasses import dataclass, field
from typing import Any, Optional

from lever_data import constants as C
from lever_data.endpoints.base import (
    BaseListRequest,
    BaseRequest,
    Endpoint,
    ListResponse,
    QueryParams,
    RequestBody,
    Response,
    add_param,
    add_params,
    path_segment,
)
from lever_data.models.user import User


def _user_body(**values: Any) -> RequestBody:
    # Unset fields are omitted rather than sent as null.
    return RequestBody(json={k: v for k, v in values.items() if v not in (None, "", [])})


@dataclass
class GetUserRequest(BaseRequest):
    user_id: str

    @property
    def path(self) -> str:
        return f"users/{path_segment(self.user_id)}"


@dataclass
class ListUsersRequest(BaseListRequest):
    """access_roles: super admin, admin, team member, limited team member or interviewer."""

    emails: list[str] = field(default_factory=list)
    access_roles: list[str] = field(default_factory=list)
    include_deactivated: bool = False
    external_directory_ids: list[str] = field(default_factory=list)

    @property
    def path(self) -> str:
        return "users"

    def add_params(self, params: QueryParams) -> None:
        add_params(params, C.EMAIL, self.emails)
        add_params(params, C.ACCESS_ROLE, self.access_roles)
        if self.include_deactivated:
            add_param(params, C.INCLUDE_DEACTIVATED, True)
        add_params(params, C.EXTERNAL_DIRECTORY_ID, self.external_directory_ids)


@dataclass
class CreateUserRequest(BaseRequest):
    method = "POST"

    name: str
    email: str
    access_role: Optional[str] = None
    external_directory_id: Optional[str] = None
    job_title: Optional[str] = None
    manager_id: Optional[str] = None

    @property
    def path(self) -> str:
        return "users"

    def body(self) -> RequestBody:
        return _user_body(
            name=self.name,
            email=self.email,
            accessRole=self.access_role,
            externalDirectoryId=self.external_directory_id,
            jobTitle=self.job_title,
            manager=self.manager_id,
        )


@dataclass
class UpdateUserRequest(BaseRequest):
    """
    Update a user. Fields left as None are not sent and keep their current
    value. linked_contact_ids is always sent, so an empty list clears it.
    Use from_user to start from a fetched record.
    """

    method = "PUT"

    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    access_role: Optional[str] = None
    photo: Optional[str] = None
    external_directory_id: Optional[str] = None
    linked_contact_ids: list[str] = field(default_factory=list)
    job_title: Optional[str] = None
    manager_id: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UpdateUserRequest":
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            access_role=user.access_role,
            photo=user.photo,
            external_directory_id=user.external_directory_id,
            linked_contact_ids=list(user.linked_contact_ids),
            job_title=user.job_title,
            manager_id=user.manager_id,
        )

    @property
    def path(self) -> str:
        return f"users/{path_segment(self.user_id)}"

    def body(self) -> RequestBody:
        body = _user_body(
            id=self.user_id,
            name=self.name,
            email=self.email,
            accessRole=self.access_role,
            photo=self.photo,
            externalDirectoryId=self.external_directory_id,
            jobTitle=self.job_title,
            manager=self.manager_id,
        )
        body.json["linkedContactIds"] = list(self.linked_contact_ids)
        return body


@dataclass
class DeactivateUserRequest(BaseRequest):
    method = "POST"

    user_id: str

    @property
    def path(self) -> str:
        return f"users/{path_segment(self.user_id)}/deactivate"


@dataclass
class ReactivateUserRequest(BaseRequest):
    method = "POST"

    user_id: str

    @property
    def path(self) -> str:
        return f"users/{path_segment(self.user_id)}/reactivate"


class UsersEndpoint(Endpoint[User]):
    def normalize(self, item: dict[str, Any]) -> User:
        return User.model_validate(item)

    def get(self, request: GetUserRequest) -> Response[User]:
        return self._fetch_one(request)

    def list(self, request: Optional[ListUsersRequest] = None) -> ListResponse[User]:
        return self._fetch_list(request or ListUsersRequest())

    def create(self, request: CreateUserRequest) -> Response[User]:
        return self._fetch_one(request)

    def update(self, request: UpdateUserRequest) -> Response[User]:
        return self._fetch_one(request)

    def deactivate(self, request: DeactivateUserRequest) -> Response[User]:
        return self._fetch_one(request)

    def reactivate(self, request: ReactivateUserRequest) -> Response[User]:
        return self._fetch_one(request)
