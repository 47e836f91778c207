"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.review import render_review_page
from app.pages.library import render_library_page
from app.pages.search import render_search_page
from app.pages.stats import render_stats_page
from app.pages.settings import render_settings_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Review", render=render_review_page),
    AppPage(title="Library", render=render_library_page),
    AppPage(title="AI Search", render=render_search_page),
    AppPage(title="Stats", render=render_stats_page),
    AppPage(title="Settings", render=render_settings_page),
]
