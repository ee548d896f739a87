from enum import Enum


class Gender(str, Enum):
    MEN = "MEN"
    WOMEN = "WOMEN"
    KIDS = "KIDS"
    UNISEX = "UNISEX"
