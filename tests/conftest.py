# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds the real service stack around an in-memory Supabase fake
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds the FastAPI app (and validates settings) at import time

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import patch

import pytest

from app.auth.state import AuthStateProvider
from app.bootstrap import Container
from app.config import Settings
from core.services.household_service import HouseholdService
from lib.supabase_client import SupabaseClient
from tests.fakes import FakeSupabase

TEST_EMAIL = "alex@example.com"
TEST_PASSWORD = "correct-horse"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase():
    """Empty in-memory Supabase with one registered user."""
    fake = FakeSupabase()
    fake.auth.register(TEST_EMAIL, TEST_PASSWORD)
    return fake


@pytest.fixture
def supabase_client(fake_supabase):
    """Real SupabaseClient wrapper whose SDK handle is the fake."""
    client = SupabaseClient("https://test-project.supabase.co", "test-anon-key")
    with patch("lib.supabase_client.create_client", return_value=fake_supabase):
        client.initialize()
    return client


@pytest.fixture
def service(supabase_client):
    """HouseholdService with nobody signed in."""
    return HouseholdService(supabase_client)


@pytest.fixture
def signed_in_service(service):
    """HouseholdService signed in as TEST_EMAIL."""
    assert service.sign_in(TEST_EMAIL, TEST_PASSWORD) is not None
    return service


@pytest.fixture
def current_user_id(fake_supabase, signed_in_service):
    return fake_supabase.auth.session.user.id


@pytest.fixture
def auth_provider(service):
    return AuthStateProvider(service)


@pytest.fixture
def container(supabase_client, service, auth_provider):
    """Composition root built around the fake."""
    return Container(
        settings=Settings(_env_file=None),
        supabase=supabase_client,
        household=service,
        auth_state=auth_provider,
    )


@pytest.fixture
def sample_recipe_row():
    """Recipe row as PostgREST returns it."""
    return {
        "id": "660e8400-e29b-41d4-a716-446655440001",
        "group_id": None,
        "created_by": "9f1c2d3e-0000-4000-8000-000000000001",
        "title": "Weeknight Chili",
        "description": "Beans, beef, patience",
        "servings": 4,
        "prep_time_minutes": 15,
        "cook_time_minutes": 45,
        "instructions": "Brown the beef. Add everything else.",
        "image_url": None,
        "created_at": "2024-01-15T10:30:00+00:00",
        "updated_at": "2024-01-15T10:30:00+00:00",
    }
