from datetime import datetime

import pytest

from ucsb_records.db import models, schemas
from ucsb_records.db.repositories import (
    articles as articles_repo,
    dining_commons as dining_repo,
    help_requests as help_repo,
    organizations as org_repo,
    users as user_repo,
)
from ucsb_records.db.repositories.base import CrudRepository
from ucsb_records.errors import EntityNotFoundError


def _help_request(**overrides):
    values = dict(
        requester_email="cgaucho@ucsb.edu",
        team_id="s22-5pm-3",
        table_or_breakout_room="7",
        request_time=datetime(2022, 4, 20, 17, 35),
        explanation="Need help with Swagger-ui",
        solved=False,
    )
    values.update(overrides)
    return schemas.HelpRequestCreate(**values)


def test_key_attribute_is_derived_from_primary_key():
    assert CrudRepository(models.HelpRequest).key_attr == "id"
    assert CrudRepository(models.UCSBOrganization).key_attr == "org_code"
    assert CrudRepository(models.Articles).entity_name == "Articles"


def test_create_assigns_id_and_persists(db_session):
    created = help_repo.create_help_request(db_session, _help_request())
    assert created.id is not None

    fetched = help_repo.get_help_request(db_session, created.id)
    assert fetched.requester_email == "cgaucho@ucsb.edu"
    assert fetched.request_time == datetime(2022, 4, 20, 17, 35)


def test_find_all_returns_every_row(db_session):
    help_repo.create_help_request(db_session, _help_request(team_id="a"))
    help_repo.create_help_request(db_session, _help_request(team_id="b"))
    assert {h.team_id for h in help_repo.get_help_requests(db_session)} == {"a", "b"}


def test_get_or_raise_missing(db_session):
    with pytest.raises(EntityNotFoundError) as exc:
        help_repo.get_help_request_or_raise(db_session, 42)
    assert exc.value.message == "HelpRequest with id 42 not found"


def test_update_replaces_fields_and_keeps_id(db_session):
    created = help_repo.create_help_request(db_session, _help_request())
    payload = schemas.HelpRequestUpdate(**_help_request(team_id="s22-6pm-1", solved=True).model_dump())

    updated = help_repo.update_help_request(db_session, created, payload)
    assert updated.id == created.id
    assert updated.team_id == "s22-6pm-1"
    assert updated.solved is True


def test_delete_removes_row(db_session):
    created = help_repo.create_help_request(db_session, _help_request())
    help_repo.delete_help_request(db_session, created)
    assert help_repo.get_help_request(db_session, created.id) is None


def test_article_optional_fields(db_session):
    created = articles_repo.create_article(
        db_session,
        schemas.ArticlesCreate(title="Hello", url="https://example.com", date_added=datetime(2024, 1, 1)),
    )
    assert created.explanation is None
    assert created.email is None


def test_menu_items_lookup(db_session):
    created = dining_repo.create_menu_item(
        db_session,
        schemas.UCSBDiningCommonsMenuItemCreate(dining_commons_code="ortega", name="Tofu Banh Mi", station="Entree"),
    )
    assert dining_repo.get_menu_item_or_raise(db_session, created.id).name == "Tofu Banh Mi"


def test_organization_create_with_existing_code_replaces(db_session):
    org_repo.create_organization(
        db_session,
        schemas.UCSBOrganizationCreate(
            org_code="ZPR", org_translation_short="ZETA PHI RHO", org_translation="ZETA PHI RHO", inactive=False
        ),
    )
    org_repo.create_organization(
        db_session,
        schemas.UCSBOrganizationCreate(
            org_code="ZPR", org_translation_short="ZPR", org_translation="ZETA PHI RHO", inactive=True
        ),
    )
    orgs = org_repo.get_organizations(db_session)
    assert len(orgs) == 1
    assert orgs[0].org_translation_short == "ZPR"
    assert orgs[0].inactive is True


def test_organization_update_keeps_key(db_session):
    created = org_repo.create_organization(
        db_session,
        schemas.UCSBOrganizationCreate(
            org_code="SKY", org_translation_short="SKYDIVING CLUB", org_translation="SKYDIVING CLUB AT UCSB", inactive=False
        ),
    )
    payload = schemas.UCSBOrganizationUpdate(
        org_code="OTHER", org_translation_short="SKY", org_translation="SKYDIVING", inactive=True
    )
    updated = org_repo.update_organization(db_session, created, payload)
    assert updated.org_code == "SKY"
    assert updated.org_translation == "SKYDIVING"
    assert org_repo.get_organization(db_session, "OTHER") is None


def test_organization_missing_message(db_session):
    with pytest.raises(EntityNotFoundError) as exc:
        org_repo.get_organization_or_raise(db_session, "NOPE")
    assert str(exc.value) == "UCSBOrganization with id NOPE not found"


def test_users_ordered_by_id(db_session):
    for email in ("b@ucsb.edu", "a@ucsb.edu"):
        db_session.add(models.User(email=email))
        db_session.commit()
    assert [u.email for u in user_repo.get_users(db_session)] == ["b@ucsb.edu", "a@ucsb.edu"]
    assert user_repo.get_user_by_email(db_session, "a@ucsb.edu").email == "a@ucsb.edu"
    assert user_repo.get_user_by_email(db_session, "zzz@ucsb.edu") is None
