"""Closed enumerations a web client is classified into."""

from enum import IntEnum, StrEnum


class Platform(IntEnum):
    """Operating-system platform of a web client."""

    OTHER = 0
    WINDOWS = 1
    WINDOWS_PHONE = 2
    WINDOWS_CE = 3
    IPHONE = 4
    IPAD = 5
    IPOD = 6
    MAC = 7
    BLACKBERRY = 8
    ANDROID = 9
    LINUX = 10
    IOS = 25


class Engine(IntEnum):
    """Rendering engine of a web client."""

    OTHER = 0
    TRIDENT = 11
    WEBKIT = 12
    GECKO = 13
    PRESTO = 14
    KHTML = 15
    AMAYA = 16
    EDGE = 23
    BLINK = 24


class Browser(IntEnum):
    """Browser of a web client."""

    OTHER = 0
    BLACKBERRY = 8
    ANDROID = 9
    IE = 17
    FIREFOX = 18
    CHROME = 19
    SAFARI = 20
    OPERA = 21
    EDGE = 23


class DetectionFlag(StrEnum):
    """Marks a detection routine that has already run on a client profile."""

    PLATFORM = "platform"
    ENGINE = "engine"
    BROWSER = "browser"
    ROBOT = "robot"
    MOBILE = "mobile"
    ACCEPT_LANGUAGE = "acceptLanguage"
    ACCEPT_ENCODING = "acceptEncoding"
    HEADERS = "headers"
