from enum import Enum


class Location(str, Enum):
    MSK = "MSK"
    SPB = "SPB"
