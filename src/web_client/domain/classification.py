"""Label to category tables for signature provider output.

Labels are matched exactly and case-sensitively. Downstream code branches on
the resulting categories, so the spellings here must not drift.
"""

from types import MappingProxyType

from web_client.domain.models.categories import Browser, Engine, Platform

PLATFORM_LABELS: MappingProxyType[str, Platform] = MappingProxyType(
    {
        "Windows": Platform.WINDOWS,
        "Windows Phone": Platform.WINDOWS_PHONE,
        "Windows CE": Platform.WINDOWS_CE,
        "iPhone": Platform.IPHONE,
        "iPad": Platform.IPAD,
        "iPod": Platform.IPOD,
        "iPod Touch": Platform.IPOD,
        "iOS": Platform.IOS,
        "OSx": Platform.MAC,
        "Mac": Platform.MAC,
        "Ubuntu": Platform.LINUX,
        "Kubuntu": Platform.LINUX,
        "Linux": Platform.LINUX,
        "BlackBerry OS": Platform.BLACKBERRY,
        "Android": Platform.ANDROID,
    }
)

ENGINE_LABELS: MappingProxyType[str, Engine] = MappingProxyType(
    {
        "Trident": Engine.TRIDENT,
        "Edge": Engine.EDGE,
        "EdgeHTML": Engine.EDGE,
        "Webkit": Engine.WEBKIT,
        "AppleWebKit": Engine.BLINK,
        "Blink": Engine.BLINK,
        "Gecko": Engine.GECKO,
        "Presto": Engine.PRESTO,
        "KHTML": Engine.KHTML,
        "Amaya": Engine.AMAYA,
    }
)

BROWSER_LABELS: MappingProxyType[str, Browser] = MappingProxyType(
    {
        "Internet Explorer": Browser.IE,
        "Microsoft Edge": Browser.EDGE,
        "Firefox": Browser.FIREFOX,
        "Opera": Browser.OPERA,
        "Opera Mobile": Browser.OPERA,
        "Chrome": Browser.CHROME,
        "Chromium": Browser.CHROME,
        "Safari": Browser.SAFARI,
        "Mobile Safari": Browser.SAFARI,
        "BlackBerry Browser": Browser.BLACKBERRY,
        "Android Browser": Browser.ANDROID,
    }
)


def classify_platform(label: str | None) -> Platform:
    """Map an operating-system label to a platform, ``OTHER`` if unknown."""
    return PLATFORM_LABELS.get(label or "", Platform.OTHER)


def classify_engine(label: str | None) -> Engine:
    """Map a rendering-engine label to an engine, ``OTHER`` if unknown."""
    return ENGINE_LABELS.get(label or "", Engine.OTHER)


def classify_browser(label: str | None) -> Browser:
    """Map a browser label to a browser, ``OTHER`` if unknown."""
    return BROWSER_LABELS.get(label or "", Browser.OTHER)
