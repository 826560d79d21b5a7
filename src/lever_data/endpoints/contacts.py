"""Contacts: the person record shared by one or more opportunities."""

from dataclasses import dataclass
from typing import Any

from lever_data.endpoints.base import BaseRequest, Endpoint, RequestBody, Response, path_segment
from lever_data.models.contact import Contact


@dataclass
class GetContactRequest(BaseRequest):
    contact_id: str

    @property
    def path(self) -> str:
        return f"contacts/{path_segment(self.contact_id)}"


@dataclass
class UpdateContactRequest(BaseRequest):
    """Update a contact from a Contact record; its id selects the contact and is not sent."""

    method = "PUT"

    contact: Contact

    @property
    def path(self) -> str:
        return f"contacts/{path_segment(self.contact.id)}"

    def body(self) -> RequestBody:
        doc = self.contact.to_wire()
        doc.pop("id", None)
        return RequestBody(json=doc)


class ContactsEndpoint(Endpoint[Contact]):
    def normalize(self, item: dict[str, Any]) -> Contact:
        return Contact.model_validate(item)

    def get(self, request: GetContactRequest) -> Response[Contact]:
        return self._fetch_one(request)

    def update(self, request: UpdateContactRequest) -> Response[Contact]:
        return self._fetch_one(request)
