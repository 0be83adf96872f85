"""Tests for video selection helpers and the YouTube Data API backend."""

from unittest.mock import MagicMock, patch

import pytest

from models import ImageResult, VideoCandidate
from services import Settings
from services.youtube import (
    PREFERRED_CHANNELS,
    _get_yt_client,
    extract_video_id,
    is_preferred_channel,
    search_videos_youtube,
    select_best_video,
    select_logo,
)


def _video(channel, link="https://www.youtube.com/watch?v=abc123", title="Demo"):
    return VideoCandidate(title=title, channel_name=channel, link=link)


class TestExtractVideoId:
    def test_watch_url(self):
        assert extract_video_id("https://www.youtube.com/watch?v=IODxDxX7oi4") == "IODxDxX7oi4"

    def test_watch_url_with_extra_params(self):
        assert extract_video_id("https://www.youtube.com/watch?v=IODxDxX7oi4&t=30s") == "IODxDxX7oi4"

    def test_short_url(self):
        assert extract_video_id("https://youtu.be/IODxDxX7oi4") == "IODxDxX7oi4"

    def test_other_site(self):
        assert extract_video_id("https://vimeo.com/12345") is None

    def test_channel_page(self):
        assert extract_video_id("https://www.youtube.com/@athleanx") is None

    def test_empty(self):
        assert extract_video_id("") is None


class TestSelectBestVideo:
    def test_preferred_channel_later_in_list_wins(self):
        videos = [
            _video("Random Gym Vlogs", title="first"),
            _video("Home Workouts Daily", title="second"),
            _video("Jeff Nippard", title="third"),
        ]
        assert select_best_video(videos).title == "third"

    def test_first_preferred_channel_wins(self):
        videos = [_video("Someone"), _video("THENX", title="a"), _video("ATHLEAN-X™", title="b")]
        assert select_best_video(videos).title == "a"

    def test_falls_back_to_first(self):
        videos = [_video("Someone", title="a"), _video("Someone Else", title="b")]
        assert select_best_video(videos).title == "a"

    def test_empty(self):
        assert select_best_video([]) is None

    def test_match_is_case_sensitive(self):
        videos = [_video("Someone", title="a"), _video("athlean-x", title="b")]
        assert select_best_video(videos).title == "a"

    def test_substring_match(self):
        assert is_preferred_channel("Jeremy Ethier Official")
        assert not is_preferred_channel("")

    @pytest.mark.parametrize("channel", PREFERRED_CHANNELS)
    def test_every_allow_listed_channel(self, channel):
        assert is_preferred_channel(channel)


class TestSelectLogo:
    def test_prefers_keyword_title(self):
        images = [
            ImageResult(title="Man doing squats at gym", image_url="https://img/1.jpg"),
            ImageResult(title="Squat ICON vector", image_url="https://img/2.png"),
        ]
        assert select_logo(images) == "https://img/2.png"

    @pytest.mark.parametrize("word", ["icon", "logo", "transparent", "isolated", "exercise"])
    def test_each_keyword(self, word):
        images = [
            ImageResult(title="photo", image_url="https://img/1.jpg"),
            ImageResult(title=f"squat {word}", image_url="https://img/2.png"),
        ]
        assert select_logo(images) == "https://img/2.png"

    def test_falls_back_to_first(self):
        images = [ImageResult(title="a", image_url="https://img/1.jpg"),
                  ImageResult(title="b", image_url="https://img/2.jpg")]
        assert select_logo(images) == "https://img/1.jpg"

    def test_empty(self):
        assert select_logo([]) is None


class TestSearchVideosYoutube:
    def test_maps_snippets(self):
        yt = MagicMock()
        yt.search.return_value.list.return_value.execute.return_value = {
            "items": [
                {"id": {"videoId": "abc"}, "snippet": {
                    "title": "How to Squat", "channelTitle": "Jeff Nippard",
                    "thumbnails": {"high": {"url": "https://i.ytimg.com/abc.jpg"}}}},
                {"id": {"channelId": "UCxyz"}, "snippet": {"title": "a channel"}},
            ]
        }
        settings = Settings(youtube_api_key="yt-key")
        with patch("services.youtube._get_yt_client", return_value=yt):
            videos = search_videos_youtube("Squat exercise tutorial proper form", settings)

        assert len(videos) == 1
        assert videos[0].channel_name == "Jeff Nippard"
        assert videos[0].link == "https://www.youtube.com/watch?v=abc"
        assert videos[0].thumbnail == "https://i.ytimg.com/abc.jpg"
        kwargs = yt.search.return_value.list.call_args[1]
        assert kwargs["q"] == "Squat exercise tutorial proper form"
        assert kwargs["maxResults"] == 5
        assert kwargs["type"] == "video"

    def test_missing_key(self):
        with patch("services.youtube._yt_client", None):
            with pytest.raises(ValueError, match="YOUTUBE_API_KEY"):
                search_videos_youtube("q", Settings())

    def test_client_rebuilt_when_key_changes(self):
        clients = [MagicMock(name="first"), MagicMock(name="second")]
        with patch("services.youtube._yt_client", None), patch("services.youtube._yt_client_key", None), \
                patch("services.youtube.build", side_effect=clients) as build:
            first = _get_yt_client(Settings(youtube_api_key="a"))
            again = _get_yt_client(Settings(youtube_api_key="a"))
            other = _get_yt_client(Settings(youtube_api_key="b"))
        assert build.call_count == 2
        assert first is again
        assert other is not first
        assert build.call_args[1]["developerKey"] == "b"
