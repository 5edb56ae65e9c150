"""
Unit tests for document helpers
"""
import pytest
import uuid

from loanlink.core.documents import InsertAck, UpdateAck, apply_patch
from loanlink.modules.loans.models import Loan
from loanlink.modules.loans.schemas import LoanUpdate, LoanResponse


class TestSplit:

    @pytest.mark.unit
    def test_split_named_and_extra(self):
        patch = LoanUpdate.model_validate({"interestRate": 4.5, "tenure": 12, "_id": "ignored"})

        fields, extra = patch.split()

        assert fields == {"interest_rate": 4.5}
        assert extra == {"tenure": 12}

    @pytest.mark.unit
    def test_split_only_sent_fields(self):
        fields, extra = LoanUpdate.model_validate({"title": None}).split()

        assert fields == {"title": None}
        assert extra == {}


class TestApplyPatch:

    @pytest.mark.unit
    def test_merge_extra_keys(self):
        loan = Loan(title="Car Loan", extra={"tenure": 12, "color": "red"})

        changed = apply_patch(loan, {"title": "Car Loan"}, {"tenure": 24})

        assert changed is True
        assert loan.extra == {"tenure": 24, "color": "red"}

    @pytest.mark.unit
    def test_no_change(self):
        loan = Loan(title="Car Loan", extra={"tenure": 12})

        assert apply_patch(loan, {"title": "Car Loan"}, {"tenure": 12}) is False


class TestRendering:

    @pytest.mark.unit
    def test_row_rendered_flat(self):
        loan_id = uuid.uuid4()
        loan = Loan(id=loan_id, title="Car Loan", created_by="manager@loanlink.test", extra={"tenure": 12})

        document = LoanResponse.model_validate(loan).model_dump(by_alias=True, mode="json")

        assert document["_id"] == str(loan_id)
        assert document["createdBy"] == "manager@loanlink.test"
        assert document["tenure"] == 12
        assert "extra" not in document

    @pytest.mark.unit
    def test_acknowledgments_use_driver_names(self):
        inserted_id = uuid.uuid4()

        assert InsertAck(inserted_id=inserted_id).model_dump(by_alias=True) == {
            "acknowledged": True,
            "insertedId": inserted_id,
        }
        assert UpdateAck(matched_count=1, modified_count=0).model_dump(by_alias=True) == {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 0,
            "upsertedCount": 0,
            "upsertedId": None,
        }
