# dependencies.py
from fastapi import Request

from internest.data.internships import Internship
from internest.db.stores import PreferenceStore, SearchLogStore


def get_preference_store(request: Request) -> PreferenceStore:
    return request.app.state.preference_store


def get_search_log_store(request: Request) -> SearchLogStore:
    return request.app.state.search_log_store


def get_catalog(request: Request) -> list[Internship]:
    return request.app.state.catalog
