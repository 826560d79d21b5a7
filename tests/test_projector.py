"""Unit tests for projecting raw records into resolved models."""

import pytest

from conftest import POSTING, STAGES, USERS, expand_opportunity
from lever_data.errors import ExpansionError
from lever_data.expansion import (
    project_application,
    project_feedback_form,
    project_interview,
    project_opportunity,
    project_posting,
)
from lever_data.models.raw import (
    RawApplication,
    RawFeedbackForm,
    RawInterview,
    RawOpportunity,
    RawPosting,
)

CHANDLER = "df0adaa6-172c-4cd6-8520-49b203660fe1"
RACHEL = "ecdb6670-d9f3-4b87-8267-1cde26d1bc42"
MONICA = "022d6639-1333-419b-9635-31f93015335f"
PHONE_SCREEN = "00922a60-7c15-422b-b086-f62000824fd7"


class TestProjectOpportunity:
    """Tests for project_opportunity."""

    def test_ids_only(self, shane_smith: dict) -> None:
        """Unexpanded response fills the ID views and leaves records empty."""
        opp = project_opportunity(RawOpportunity.model_validate(shane_smith))
        assert opp.id == "250d8f03-738a-4bba-a671-8a3d73477145"
        assert opp.stage_id == PHONE_SCREEN
        assert opp.stage is None
        assert opp.owner_id == CHANDLER
        assert opp.owner is None
        assert opp.sourced_by_id == CHANDLER
        assert opp.contact_id == "7f23e772-f2cb-4ebb-b33f-54b872999992"
        assert opp.contact is None
        assert opp.follower_ids == [CHANDLER, RACHEL, MONICA]
        assert opp.followers == []
        assert opp.application_ids == ["a1b2c3d4-0000-4000-8000-000000000001"]
        assert opp.applications == []

    def test_plain_fields_copied(self, shane_smith: dict) -> None:
        opp = project_opportunity(RawOpportunity.model_validate(shane_smith))
        assert opp.name == "Shane Smith"
        assert opp.emails == ["shane@exampleq3.com"]
        assert opp.phones[0].value == "(123) 456-7891"
        assert opp.tags == ["San Francisco", "Full-time", "Customer Success"]
        assert opp.created_at == 1407460071043
        assert opp.snoozed_until == 1505971500000
        assert opp.stage_changes[0].to_stage_index == 1
        assert opp.urls.show.endswith("250d8f03-738a-4bba-a671-8a3d73477145")
        assert opp.data_protection.store.allowed is True
        assert opp.data_protection.contact.expires_at is None
        assert opp.archived is None

    def test_expanded(self, shane_smith: dict) -> None:
        """Embedded records fill both views, IDs matching the records in order."""
        payload = expand_opportunity(shane_smith, "stage", "owner", "sourcedBy", "followers", "contact")
        opp = project_opportunity(RawOpportunity.model_validate(payload))
        assert opp.stage_id == PHONE_SCREEN
        assert opp.stage.text == STAGES[PHONE_SCREEN]["text"]
        assert opp.owner.name == "Chandler Bing"
        assert opp.sourced_by.id == CHANDLER
        assert opp.follower_ids == [CHANDLER, RACHEL, MONICA]
        assert [u.id for u in opp.followers] == opp.follower_ids
        assert opp.followers[1].name == USERS[RACHEL]["name"]
        assert opp.contact.id == opp.contact_id
        assert opp.contact.location.name == "Oakland"

    def test_null_fields_are_absent(self, chaofan_west: dict) -> None:
        """JSON null and [] leave both views empty."""
        opp = project_opportunity(RawOpportunity.model_validate(chaofan_west))
        assert opp.sourced_by_id == ""
        assert opp.sourced_by is None
        assert opp.application_ids == []
        assert opp.applications == []

    def test_expanded_applications_with_nested_posting(self, shane_smith: dict) -> None:
        """Applications embedding their posting come back fully resolved."""
        payload = expand_opportunity(shane_smith, "applications")
        payload["applications"][0]["posting"] = dict(POSTING, owner=USERS[CHANDLER])
        opp = project_opportunity(RawOpportunity.model_validate(payload))

        assert opp.application_ids == ["a1b2c3d4-0000-4000-8000-000000000001"]
        app = opp.applications[0]
        assert app.posting_id == POSTING["id"]
        assert app.posting.text == "Customer Success Manager"
        assert app.posting.owner_id == CHANDLER
        assert app.posting.owner.name == "Chandler Bing"
        assert app.posting.hiring_manager_id == RACHEL
        assert app.posting.hiring_manager is None
        assert app.posting_owner_id == CHANDLER
        assert app.user_id == ""

    def test_malformed_field_raises(self, shane_smith: dict) -> None:
        shane_smith["stage"] = [[]]
        with pytest.raises(ExpansionError) as exc_info:
            project_opportunity(RawOpportunity.model_validate(shane_smith))
        assert exc_info.value.field == "stage"

    def test_nested_failure_names_full_path(self, shane_smith: dict) -> None:
        """A bad field deep inside an application fails the whole opportunity."""
        payload = expand_opportunity(shane_smith, "applications")
        payload["applications"][0]["posting"] = dict(POSTING, user=42)
        with pytest.raises(ExpansionError) as exc_info:
            project_opportunity(RawOpportunity.model_validate(payload))
        assert exc_info.value.field == "applications[0].posting.user"

    def test_mixed_followers_raise(self, shane_smith: dict) -> None:
        shane_smith["followers"] = [CHANDLER, USERS[RACHEL]]
        with pytest.raises(ExpansionError) as exc_info:
            project_opportunity(RawOpportunity.model_validate(shane_smith))
        assert exc_info.value.field == "followers"


class TestProjectPosting:
    """Tests for project_posting."""

    def test_ids(self, posting_payload: dict) -> None:
        posting = project_posting(RawPosting.model_validate(posting_payload))
        assert posting.user_id == CHANDLER
        assert posting.owner_id == CHANDLER
        assert posting.hiring_manager_id == RACHEL
        assert posting.follower_ids == [CHANDLER, MONICA]
        assert posting.followers == []
        assert posting.categories.all_locations == ["San Francisco"]
        assert posting.urls.apply.endswith("/apply")

    def test_expanded(self, posting_payload: dict) -> None:
        posting_payload["hiringManager"] = USERS[RACHEL]
        posting_payload["followers"] = [USERS[CHANDLER], USERS[MONICA]]
        posting = project_posting(RawPosting.model_validate(posting_payload))
        assert posting.hiring_manager.email == "rachel@example.com"
        assert [u.username for u in posting.followers] == ["chandler", "monica"]
        assert posting.follower_ids == [CHANDLER, MONICA]

    def test_error_uses_wire_name(self, posting_payload: dict) -> None:
        posting_payload["hiringManager"] = True
        with pytest.raises(ExpansionError) as exc_info:
            project_posting(RawPosting.model_validate(posting_payload))
        assert exc_info.value.field == "hiringManager"


class TestProjectApplication:
    """Tests for project_application."""

    def test_ids(self, application_payload: dict) -> None:
        app = project_application(RawApplication.model_validate(application_payload))
        assert app.posting_id == POSTING["id"]
        assert app.posting is None
        assert app.posting_owner_id == CHANDLER
        assert app.posting_hiring_manager_id == RACHEL
        assert app.user_id == ""
        assert app.type == "posting"
        assert app.opportunity_id == "250d8f03-738a-4bba-a671-8a3d73477145"

    def test_expanded_users(self, application_payload: dict) -> None:
        application_payload["postingOwner"] = USERS[CHANDLER]
        application_payload["user"] = USERS[MONICA]
        app = project_application(RawApplication.model_validate(application_payload))
        assert app.posting_owner.name == "Chandler Bing"
        assert app.user_id == MONICA
        assert app.user.access_role == "team member"


class TestProjectInterview:
    """Tests for project_interview."""

    def _interview(self) -> dict:
        return {
            "id": "iv-1",
            "panel": "panel-1",
            "subject": "On-site",
            "interviewers": [{"id": RACHEL, "name": "Rachel Green", "email": "rachel@example.com"}],
            "timezone": "America/Los_Angeles",
            "date": 1423187000000,
            "duration": 60,
            "feedbackTemplate": "tmpl-1",
            "feedbackReminder": "daily",
            "user": CHANDLER,
            "stage": PHONE_SCREEN,
            "feedbackForms": ["fb-1", "fb-2"],
            "postings": [POSTING["id"]],
        }

    def test_ids(self) -> None:
        iv = project_interview(RawInterview.model_validate(self._interview()))
        assert iv.panel_id == "panel-1"
        assert iv.feedback_template_id == "tmpl-1"
        assert iv.interviewers[0].name == "Rachel Green"
        assert iv.user_id == CHANDLER
        assert iv.stage_id == PHONE_SCREEN
        assert iv.feedback_form_ids == ["fb-1", "fb-2"]
        assert iv.feedback_forms == []
        assert iv.posting_ids == [POSTING["id"]]
        assert iv.postings == []

    def test_expanded_nested(self) -> None:
        """Embedded feedback forms and postings are projected too."""
        data = self._interview()
        data["feedbackForms"] = [
            {"id": "fb-1", "text": "Phone screen", "user": USERS[RACHEL]},
            {"id": "fb-2", "text": "Culture", "user": MONICA},
        ]
        data["postings"] = [POSTING]
        data["stage"] = STAGES[PHONE_SCREEN]
        iv = project_interview(RawInterview.model_validate(data))
        assert iv.feedback_form_ids == ["fb-1", "fb-2"]
        assert iv.feedback_forms[0].user.name == "Rachel Green"
        assert iv.feedback_forms[1].user_id == MONICA
        assert iv.feedback_forms[1].user is None
        assert iv.postings[0].hiring_manager_id == RACHEL
        assert iv.stage.text == "Phone Screen"

    def test_nested_feedback_failure(self) -> None:
        data = self._interview()
        data["feedbackForms"] = [{"id": "fb-1", "user": ["x"]}]
        with pytest.raises(ExpansionError) as exc_info:
            project_interview(RawInterview.model_validate(data))
        assert exc_info.value.field == "feedbackForms[0].user"


class TestProjectFeedbackForm:
    """Tests for project_feedback_form."""

    def test_user_id(self) -> None:
        form = project_feedback_form(
            RawFeedbackForm.model_validate(
                {
                    "id": "fb-1",
                    "type": "interview",
                    "baseTemplate": "tmpl-1",
                    "interview": "iv-1",
                    "panel": "panel-1",
                    "forms": [{"type": "score-system", "text": "Rating", "value": 3}],
                    "completedAt": 1417588008760,
                    "user": CHANDLER,
                }
            )
        )
        assert form.user_id == CHANDLER
        assert form.user is None
        assert form.base_template_id == "tmpl-1"
        assert form.interview_id == "iv-1"
        assert form.forms[0]["value"] == 3
        assert form.completed_at == 1417588008760
