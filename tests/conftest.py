"""Pytest fixtures for lever-data tests."""

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
import pytest

from lever_data.client import LeverClient
from lever_data.config import ClientConfig

API_KEY = "test-api-key"
BASE_URL = "https://api.lever.co/v1"

USERS: dict[str, dict[str, Any]] = {
    "df0adaa6-172c-4cd6-8520-49b203660fe1": {
        "id": "df0adaa6-172c-4cd6-8520-49b203660fe1",
        "name": "Chandler Bing",
        "username": "chandler",
        "email": "chandler@example.com",
        "createdAt": 1407357447018,
        "deactivatedAt": None,
        "accessRole": "super admin",
        "photo": "https://gravatar.com/avatar/gp781413e3bb44143bddf43589b03038?s=26&d=404",
        "externalDirectoryId": "2277",
        "linkedContactIds": ["7f23e772-f2cb-4ebb-b33f-54b872999992"],
        "jobTitle": "Talent Acquisition Manager",
        "manager": "ecdb6670-d9f3-4b87-8267-1cde26d1bc42",
    },
    "ecdb6670-d9f3-4b87-8267-1cde26d1bc42": {
        "id": "ecdb6670-d9f3-4b87-8267-1cde26d1bc42",
        "name": "Rachel Green",
        "username": "rachel",
        "email": "rachel@example.com",
        "createdAt": 1407357447018,
        "accessRole": "admin",
    },
    "022d6639-1333-419b-9635-31f93015335f": {
        "id": "022d6639-1333-419b-9635-31f93015335f",
        "name": "Monica Geller",
        "username": "monica",
        "email": "monica@example.com",
        "createdAt": 1407357447018,
        "accessRole": "team member",
    },
}

STAGES: dict[str, dict[str, Any]] = {
    "00922a60-7c15-422b-b086-f62000824fd7": {
        "id": "00922a60-7c15-422b-b086-f62000824fd7",
        "text": "Phone Screen",
    },
    "offer": {"id": "offer", "text": "Offer"},
}

POSTING = {
    "id": "cdb4ff13-f7aa-49b0-b6ec-eb4617009cfa",
    "text": "Customer Success Manager",
    "createdAt": 1407355312618,
    "updatedAt": 1407355326437,
    "state": "published",
    "distributionChannels": ["public", "internal"],
    "confidentiality": "non-confidential",
    "categories": {
        "team": "Customer Success",
        "location": "San Francisco",
        "commitment": "Full-time",
        "allLocations": ["San Francisco"],
    },
    "tags": ["Customer Success"],
    "country": "US",
    "requisitionCodes": ["CSM-12"],
    "urls": {
        "list": "https://jobs.lever.co/example",
        "show": "https://jobs.lever.co/example/cdb4ff13",
        "apply": "https://jobs.lever.co/example/cdb4ff13/apply",
    },
    "workplaceType": "onsite",
    "user": "df0adaa6-172c-4cd6-8520-49b203660fe1",
    "owner": "df0adaa6-172c-4cd6-8520-49b203660fe1",
    "hiringManager": "ecdb6670-d9f3-4b87-8267-1cde26d1bc42",
    "followers": [
        "df0adaa6-172c-4cd6-8520-49b203660fe1",
        "022d6639-1333-419b-9635-31f93015335f",
    ],
}

APPLICATION = {
    "id": "a1b2c3d4-0000-4000-8000-000000000001",
    "opportunityId": "250d8f03-738a-4bba-a671-8a3d73477145",
    "candidateId": "250d8f03-738a-4bba-a671-8a3d73477145",
    "createdAt": 1407460071043,
    "type": "posting",
    "posting": "cdb4ff13-f7aa-49b0-b6ec-eb4617009cfa",
    "postingOwner": "df0adaa6-172c-4cd6-8520-49b203660fe1",
    "postingHiringManager": "ecdb6670-d9f3-4b87-8267-1cde26d1bc42",
    "user": None,
    "archived": None,
    "customQuestions": [],
}

SHANE_SMITH = {
    "id": "250d8f03-738a-4bba-a671-8a3d73477145",
    "name": "Shane Smith",
    "headline": "Brickly LLC, Vandelay Industries, Inc, Central Perk",
    "contact": "7f23e772-f2cb-4ebb-b33f-54b872999992",
    "emails": ["shane@exampleq3.com"],
    "phones": [{"value": "(123) 456-7891"}],
    "confidentiality": "non-confidential",
    "location": "Oakland",
    "links": ["indeed.com/r/Shane-Smith/0b7c87f6b246d2bc"],
    "createdAt": 1407460071043,
    "updatedAt": 1407460080914,
    "lastInteractionAt": 1417588008760,
    "lastAdvancedAt": 1417587916150,
    "snoozedUntil": 1505971500000,
    "archived": None,
    "stage": "00922a60-7c15-422b-b086-f62000824fd7",
    "stageChanges": [
        {
            "toStageId": "00922a60-7c15-422b-b086-f62000824fd7",
            "toStageIndex": 1,
            "userId": "df0adaa6-172c-4cd6-8520-49b203660fe1",
            "updatedAt": 1407460071043,
        }
    ],
    "owner": "df0adaa6-172c-4cd6-8520-49b203660fe1",
    "tags": ["San Francisco", "Full-time", "Customer Success"],
    "sources": ["linkedin"],
    "origin": "sourced",
    "sourcedBy": "df0adaa6-172c-4cd6-8520-49b203660fe1",
    "applications": ["a1b2c3d4-0000-4000-8000-000000000001"],
    "followers": [
        "df0adaa6-172c-4cd6-8520-49b203660fe1",
        "ecdb6670-d9f3-4b87-8267-1cde26d1bc42",
        "022d6639-1333-419b-9635-31f93015335f",
    ],
    "urls": {
        "list": "https://hire.lever.co/candidates",
        "show": "https://hire.lever.co/candidates/250d8f03-738a-4bba-a671-8a3d73477145",
    },
    "dataProtection": {
        "store": {"allowed": True, "expiresAt": 1522540800000},
        "contact": {"allowed": False, "expiresAt": None},
    },
    "isAnonymized": False,
}

CHAOFAN_WEST = {
    "id": "5c86dcd8-6cf1-40da-9ae3-5e7ea91079f5",
    "name": "Chaofan West",
    "contact": "bd4d81c8-7858-4624-be98-552dfb9ca850",
    "emails": ["chaofan@example.com"],
    "location": "San Francisco",
    "createdAt": 1407778275799,
    "stage": "offer",
    "owner": "ecdb6670-d9f3-4b87-8267-1cde26d1bc42",
    "sourcedBy": None,
    "applications": [],
    "followers": ["ecdb6670-d9f3-4b87-8267-1cde26d1bc42"],
}


def expand_opportunity(opportunity: dict[str, Any], *fields: str) -> dict[str, Any]:
    """Copy of opportunity with the named fields replaced by their embedded records."""
    expanded = copy.deepcopy(opportunity)
    for name in fields:
        value = expanded.get(name)
        if name == "stage":
            expanded["stage"] = STAGES[value]
        elif name in ("owner", "sourcedBy") and value is not None:
            expanded[name] = USERS[value]
        elif name == "followers":
            expanded["followers"] = [USERS[u] for u in value]
        elif name == "applications":
            expanded["applications"] = [copy.deepcopy(APPLICATION) for _ in value]
        elif name == "contact":
            expanded["contact"] = {
                "id": value,
                "name": expanded.get("name"),
                "emails": expanded.get("emails", []),
                "location": {"name": expanded.get("location")},
            }
    return expanded


@dataclass
class ExpectedRequest:
    """One request a test expects, and the response to send back for it."""

    status_code: int = 200
    body: Any = None
    method: Optional[str] = None
    path: Optional[str] = None
    query: dict[str, list[str]] = field(default_factory=dict)
    no_query: bool = False
    headers: dict[str, str] = field(default_factory=dict)
    json_body: Any = None
    content: Optional[bytes] = None
    response_headers: dict[str, str] = field(default_factory=dict)


class ExpectHandler:
    """
    httpx.MockTransport handler that checks each request against the next
    ExpectedRequest in sequence and replies with its canned response.
    """

    def __init__(self, *expected: ExpectedRequest):
        self.expected = list(expected)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        assert self.expected, f"unexpected request: {request.method} {request.url}"
        exp = self.expected.pop(0)
        self.requests.append(request)

        if exp.method is not None:
            assert request.method == exp.method
        if exp.path is not None:
            assert request.url.path == exp.path
        for key, values in exp.query.items():
            actual = request.url.params.get_list(key)
            for value in values:
                assert value in actual, f"expected query {key}={value}, got {actual}"
        if exp.no_query:
            assert not request.url.params
        for key, value in exp.headers.items():
            assert request.headers.get(key) == value, f"header {key}"
        if exp.json_body is not None:
            assert json.loads(request.content) == exp.json_body

        if exp.content is not None:
            return httpx.Response(exp.status_code, content=exp.content, headers=exp.response_headers)
        if exp.body is None:
            return httpx.Response(exp.status_code, headers=exp.response_headers)
        if isinstance(exp.body, str):
            return httpx.Response(exp.status_code, text=exp.body, headers=exp.response_headers)
        return httpx.Response(exp.status_code, json=exp.body, headers=exp.response_headers)

    def assert_done(self) -> None:
        assert not self.expected, f"{len(self.expected)} expected requests were not made"


def make_client(handler: ExpectHandler, **overrides: Any) -> LeverClient:
    """LeverClient wired to handler through httpx.MockTransport."""
    config = ClientConfig(api_key=API_KEY, base_url=BASE_URL)
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return LeverClient(config, client=http, **overrides)


@pytest.fixture
def shane_smith() -> dict[str, Any]:
    """Opportunity payload with every expandable field as an ID."""
    return copy.deepcopy(SHANE_SMITH)


@pytest.fixture
def chaofan_west() -> dict[str, Any]:
    """Opportunity payload with null sourcedBy and no applications."""
    return copy.deepcopy(CHAOFAN_WEST)


@pytest.fixture
def posting_payload() -> dict[str, Any]:
    return copy.deepcopy(POSTING)


@pytest.fixture
def application_payload() -> dict[str, Any]:
    return copy.deepcopy(APPLICATION)


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return copy.deepcopy(USERS["df0adaa6-172c-4cd6-8520-49b203660fe1"])
