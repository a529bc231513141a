from __future__ import annotations

from typing import Any

import requests

from movieBrowser.utils import log_debug, throttle
from movieBrowser.metadata.core.models import (
    Configuration,
    Genre,
    ImagesConfig,
    MovieDetails,
    MovieListType,
    MoviesList,
    MovieSummary,
)


class NetworkError(Exception):
    """Any TMDb transport / HTTP / payload failure."""


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) v3 REST API."""
    BASE_URL = "https://api.themoviedb.org/3"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        language: str | None = None,
        timeout: float = 10,
    ):
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("No TMDB api key passed")
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.language = language
        self.timeout = timeout

    @throttle(min_delay=0.25)                # ≈ 4 req/sec, well under TMDb's cap
    def _get(self, path: str, **params) -> Any:
        params["api_key"] = self.api_key
        if self.language:
            params.setdefault("language", self.language)
        url = f"{self.base_url}{path}"
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            log_debug(f"TMDb GET {path} failed: {e}")
            raise NetworkError(str(e)) from e
        except ValueError as e:                       # body wasn't JSON
            log_debug(f"TMDb GET {path} returned invalid JSON: {e}")
            raise NetworkError(f"Invalid JSON from {path}") from e
        log_debug(f"TMDb GET {path} → {resp.status_code}")
        return payload

    # ------------------------------------------------------------------
    # Public – endpoints
    # ------------------------------------------------------------------
    def fetch_configuration(self) -> Configuration:
        """`/configuration` → image base URL + poster sizes."""
        images = self._get("/configuration").get("images") or {}
        base_url = images.get("secure_base_url") or images.get("base_url")
        poster_sizes = list(images.get("poster_sizes") or [])
        if not base_url or not poster_sizes:
            log_debug(f"TMDb /configuration has no usable images block: {images!r}")
            raise NetworkError("Configuration payload lacks image base URL or poster sizes")
        return Configuration(images=ImagesConfig(base_url=base_url, poster_sizes=poster_sizes))

    def fetch_movies(self, list_type: MovieListType, page: int = 1) -> MoviesList:
        """One page of a movie list (popular, top rated, …)."""
        payload = self._get(list_type.path, page=page)
        return MoviesList(
            results=[self._parse_summary(m) for m in payload.get("results", [])],
            page=payload.get("page", page),
            total_pages=payload.get("total_pages", 1),
            total_results=payload.get("total_results", 0),
        )

    def fetch_movie_details(self, movie_id: int) -> MovieDetails:
        det = self._get(f"/movie/{movie_id}")
        return MovieDetails(
            title=det.get("title"),
            overview=det.get("overview"),
            poster_path=det.get("poster_path"),
            budget=det.get("budget"),
            runtime=det.get("runtime"),
            genres=[Genre(id=g["id"], name=g["name"]) for g in det.get("genres") or []],
        )

    def fetch_image(self, url: str) -> bytes:
        """Raw bytes of a poster from the image CDN (no api_key, no throttle)."""
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            log_debug(f"Image GET {url} failed: {e}")
            raise NetworkError(str(e)) from e
        return resp.content

    # ------------------------------------------------------------------
    # Internal helpers – payload parsing
    # ------------------------------------------------------------------
    @staticmethod
    def _parse_summary(item: dict) -> MovieSummary:
        return MovieSummary(
            id=item["id"],
            title=item.get("title"),
            poster_path=item.get("poster_path"),
            release_date=item.get("release_date") or "",
        )
