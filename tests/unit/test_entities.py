"""Unit tests for domain entity helpers."""

from case_library.domain.entities import AdminUser, FilterState, is_admin_email

from tests.store_fakes import make_case


def test_thumbnail_for_youtube_watch_url():
    case = make_case(video_url="https://www.youtube.com/watch?v=abc123&t=10")
    assert case.thumbnail_url() == "https://img.youtube.com/vi/abc123/hqdefault.jpg"


def test_thumbnail_for_short_youtube_url():
    case = make_case(video_url="https://youtu.be/xyz789")
    assert case.thumbnail_url() == "https://img.youtube.com/vi/xyz789/hqdefault.jpg"


def test_thumbnail_falls_back_to_seeded_placeholder():
    case = make_case("42", video_url="https://drive.google.com/file/d/abc/view")
    assert case.thumbnail_url() == "https://picsum.photos/seed/42/400/225"


def test_admin_email_match_is_case_insensitive():
    admin = AdminUser(email="Alice@Co.com")
    assert admin.matches("alice@co.com")
    assert admin.matches(" ALICE@CO.COM ")
    assert not admin.matches("bob@co.com")


def test_is_admin_email_over_list():
    admins = [AdminUser(email="a@co.com"), AdminUser(email="B@co.com")]
    assert is_admin_email(admins, "b@CO.com")
    assert not is_admin_email(admins, "c@co.com")
    assert not is_admin_email([], "a@co.com")


def test_filter_state_is_empty():
    assert FilterState().is_empty
    assert not FilterState(region="USA").is_empty
