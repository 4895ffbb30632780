from __future__ import annotations

import copy

import pytest

from tikdl.normalizer import UNKNOWN_DATE, build_media, format_date, format_number, is_photo_post, normalize


def test_photo_post_emits_only_photos_in_order(photo_payload) -> None:
    result = normalize(photo_payload)

    assert result["data"] == [
        {"type": "photo", "url": "https://p16.example/1.jpg"},
        {"type": "photo", "url": "https://p16.example/2.jpg"},
        {"type": "photo", "url": "https://p16.example/3.jpg"},
    ]


def test_video_post_emits_variants_in_fixed_order(video_payload) -> None:
    result = normalize(video_payload)

    assert [m["type"] for m in result["data"]] == ["watermark", "nowatermark", "nowatermark_hd"]
    assert result["data"][2]["url"] == "https://v.example/hd.mp4"


def test_video_post_skips_absent_and_empty_variants(video_payload) -> None:
    del video_payload["wmplay"]
    video_payload["hdplay"] = ""

    assert build_media(video_payload) == [{"type": "nowatermark", "url": "https://v.example/nowm.mp4"}]


def test_images_ignored_when_any_size_field_present(video_payload) -> None:
    video_payload["images"] = ["https://p16.example/1.jpg"]

    assert not is_photo_post(video_payload)
    assert all(m["type"] != "photo" for m in normalize(video_payload)["data"])


def test_neither_images_nor_play_urls_gives_empty_media() -> None:
    result = normalize({"id": "1", "title": "empty"})

    assert result["data"] == []
    assert result["status"] is True


def test_missing_optional_sections_use_defaults() -> None:
    result = normalize({})

    assert result["music_info"] == {"id": "", "title": "", "author": "", "album": None, "url": ""}
    assert result["author"] == {"id": "", "fullname": "", "nickname": "", "avatar": ""}
    assert result["stats"] == {"views": "0", "likes": "0", "comment": "0", "share": "0", "download": "0"}
    assert result["taken_at"] == UNKNOWN_DATE
    assert result["duration"] == "0 Seconds"


def test_non_mapping_sections_do_not_raise() -> None:
    result = normalize({"author": "nobody", "music_info": ["x"], "images": "not-a-list"})

    assert result["author"]["fullname"] == ""
    assert result["music_info"]["title"] == ""
    assert result["data"] == []


def test_full_video_mapping(video_payload) -> None:
    result = normalize(video_payload)

    assert result["title"] == "sunset timelapse #fyp"
    assert result["region"] == "ID"
    assert result["id"] == "7312345678901234567"
    assert result["durations"] == 15
    assert result["duration"] == "15 Seconds"
    assert result["cover"] == "https://p16.example/cover.jpg"
    assert (result["size_wm"], result["size_nowm"], result["size_nowm_hd"]) == (2150000, 2048000, 4096000)
    assert result["taken_at"] == "Tuesday, January 2, 2024 at 3:04:05 PM"
    assert result["author"] == {
        "id": "6800000000000000000",
        "fullname": "creator.handle",
        "nickname": "Creator",
        "avatar": "https://p16.example/avatar.jpg",
    }
    assert result["stats"] == {
        "views": "12.345",
        "likes": "1.234.567",
        "comment": "89",
        "share": "1.000",
        "download": "0",
    }


def test_music_url_prefers_top_level_then_play(video_payload) -> None:
    assert normalize(video_payload)["music_info"]["url"] == "https://a.example/music.mp3"
    assert normalize(video_payload)["music_info"]["album"] is None

    del video_payload["music"]
    assert normalize(video_payload)["music_info"]["url"] == "https://a.example/fallback.mp3"


def test_raw_payload_is_not_passed_through(video_payload) -> None:
    result = normalize(video_payload)

    assert "wmplay" not in result
    assert "play_count" not in result


def test_normalize_is_idempotent_and_pure(video_payload) -> None:
    before = copy.deepcopy(video_payload)

    assert normalize(video_payload) == normalize(video_payload)
    assert video_payload == before


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (12345, "12.345"),
        (999, "999"),
        (1000000, "1.000.000"),
        ("2500", "2.500"),
        (12.9, "12"),
        (None, "0"),
        ("n/a", "0"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize("value", [0, -5, None, "", "abc"])
def test_format_date_unknown_for_missing_or_non_positive(value) -> None:
    assert format_date(value) == UNKNOWN_DATE


def test_format_date_morning_and_midnight() -> None:
    # 2024-01-02 00:00:07 UTC
    assert format_date(1704153607) == "Tuesday, January 2, 2024 at 12:00:07 AM"
