"""Master data (category lookup) models."""

from __future__ import annotations

from pydantic import BaseModel


class SubCategory(BaseModel):
    title: str
    photo: str = ""


class Category(BaseModel):
    """Top-level category entry; ``key`` is the value employees are filtered by."""

    key: str
    title: str
    photo: str = ""


class MasterData(BaseModel):
    category: list[Category] = []
    country: list[SubCategory] = []
    role: list[SubCategory] = []
    birthplace: list[SubCategory] = []
    yearofbirth: list[SubCategory] = []
    monthofbirth: list[SubCategory] = []
    project: list[SubCategory] = []
    club: list[SubCategory] = []
    gender: list[SubCategory] = []
    joiningyear: list[SubCategory] = []
    office: list[SubCategory] = []
