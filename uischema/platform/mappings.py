"""Platform mapping tables.

Schemas are authored against ``pc-web`` (React/HTML naming). Each target
platform has a default table of prop, style and event renames; a few
component types layer their own overrides on top.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PlatformType(str, Enum):
    """Supported target runtimes."""

    PC_WEB = "pc-web"  # React/HTML, the authoring platform
    MOBILE_WEB = "mobile-web"  # Touch browsers
    MOBILE_NATIVE = "mobile-native"  # React Native
    PC_DESKTOP = "pc-desktop"  # Electron/Tauri


class PlatformMapping(BaseModel):
    """Key renames for one platform (and optionally one component type)."""

    model_config = ConfigDict(frozen=True)

    props: dict[str, str] = Field(default_factory=dict)
    styles: dict[str, str] = Field(default_factory=dict)
    events: dict[str, str] = Field(default_factory=dict)

    def merged(self, *overrides: "PlatformMapping | None") -> "PlatformMapping":
        """Layer ``overrides`` over this mapping; later layers win per key."""
        props, styles, events = dict(self.props), dict(self.styles), dict(self.events)
        for layer in overrides:
            if layer is None:
                continue
            props.update(layer.props)
            styles.update(layer.styles)
            events.update(layer.events)
        return PlatformMapping(props=props, styles=styles, events=events)


def _identity(*names: str) -> dict[str, str]:
    return {name: name for name in names}


_WEB_PROPS = _identity(
    "className", "id", "disabled", "placeholder", "value", "defaultValue",
    "checked", "selected", "readOnly", "required", "autoFocus", "autoComplete",
    "name", "type", "href", "target", "src", "alt", "title", "role", "tabIndex",
    "aria-label", "aria-describedby", "aria-hidden", "data-testid",
)

_WEB_STYLES = _identity(
    "width", "height", "minWidth", "maxWidth", "minHeight", "maxHeight",
    "padding", "paddingTop", "paddingRight", "paddingBottom", "paddingLeft",
    "margin", "marginTop", "marginRight", "marginBottom", "marginLeft",
    "display", "flexDirection", "justifyContent", "alignItems", "alignSelf",
    "flexWrap", "flexGrow", "flexShrink", "gap", "rowGap", "columnGap",
    "position", "top", "right", "bottom", "left", "zIndex",
    "overflow", "overflowX", "overflowY",
    "backgroundColor", "color", "fontSize", "fontWeight", "fontFamily",
    "fontStyle", "lineHeight", "textAlign", "textDecoration", "textTransform",
    "letterSpacing", "border", "borderWidth", "borderStyle", "borderColor",
    "borderRadius", "borderTop", "borderRight", "borderBottom", "borderLeft",
    "boxShadow", "opacity", "cursor", "visibility", "transform", "transition",
)

_WEB_EVENTS = _identity(
    "onClick", "onDoubleClick", "onChange", "onInput", "onSubmit", "onFocus",
    "onBlur", "onKeyDown", "onKeyUp", "onKeyPress", "onMouseEnter",
    "onMouseLeave", "onMouseDown", "onMouseUp", "onMouseMove", "onScroll",
    "onWheel", "onDragStart", "onDrag", "onDragEnd", "onDrop", "onDragOver",
    "onContextMenu", "onCopy", "onPaste", "onCut", "onLoad", "onError",
)


_PC_WEB = PlatformMapping(props=_WEB_PROPS, styles=_WEB_STYLES, events=_WEB_EVENTS)

_MOBILE_WEB = PlatformMapping(
    props={**_WEB_PROPS, **_identity("size", "variant")},
    styles={
        **_WEB_STYLES,
        **_identity("WebkitTapHighlightColor", "WebkitOverflowScrolling", "touchAction"),
    },
    events={
        # Mouse events become touch events
        "onClick": "onTap",
        "onDoubleClick": "onDoubleTap",
        "onMouseEnter": "onTouchStart",
        "onMouseLeave": "onTouchEnd",
        "onMouseDown": "onTouchStart",
        "onMouseUp": "onTouchEnd",
        "onMouseMove": "onTouchMove",
        **_identity(
            "onChange", "onInput", "onSubmit", "onFocus", "onBlur", "onKeyDown",
            "onKeyUp", "onKeyPress", "onScroll", "onLoad", "onError",
            "onTouchStart", "onTouchMove", "onTouchEnd", "onTouchCancel",
            "onSwipe", "onSwipeLeft", "onSwipeRight", "onSwipeUp", "onSwipeDown",
            "onPinch", "onLongPress",
        ),
    },
)

_MOBILE_NATIVE = PlatformMapping(
    props={
        "className": "style",
        "id": "testID",
        "checked": "value",
        "readOnly": "editable",
        "name": "nativeID",
        "type": "keyboardType",
        "src": "source",
        "alt": "accessibilityLabel",
        "title": "accessibilityLabel",
        "role": "accessibilityRole",
        "aria-label": "accessibilityLabel",
        "aria-describedby": "accessibilityHint",
        "aria-hidden": "accessibilityElementsHidden",
        "data-testid": "testID",
        **_identity(
            "disabled", "placeholder", "value", "defaultValue", "selected",
            "required", "autoFocus", "autoComplete", "href", "tabIndex",
            "size", "variant", "multiline", "numberOfLines", "maxLength",
            "secureTextEntry", "keyboardType", "returnKeyType", "autoCapitalize",
            "autoCorrect", "selectionColor", "underlineColorAndroid",
        ),
    },
    styles={
        **_identity(
            "width", "height", "minWidth", "maxWidth", "minHeight", "maxHeight",
            "padding", "paddingTop", "paddingRight", "paddingBottom", "paddingLeft",
            "paddingHorizontal", "paddingVertical",
            "margin", "marginTop", "marginRight", "marginBottom", "marginLeft",
            "marginHorizontal", "marginVertical",
            "display", "flex", "flexDirection", "justifyContent", "alignItems",
            "alignSelf", "alignContent", "flexWrap", "flexGrow", "flexShrink",
            "flexBasis", "gap", "rowGap", "columnGap",
            "position", "top", "right", "bottom", "left", "zIndex", "overflow",
            "backgroundColor", "color", "opacity",
            "fontSize", "fontWeight", "fontFamily", "fontStyle", "lineHeight",
            "textAlign", "textDecorationLine", "textTransform", "letterSpacing",
            "borderWidth", "borderStyle", "borderColor", "borderRadius",
            "borderTopWidth", "borderRightWidth", "borderBottomWidth", "borderLeftWidth",
            "borderTopLeftRadius", "borderTopRightRadius",
            "borderBottomLeftRadius", "borderBottomRightRadius",
            "shadowColor", "shadowOffset", "shadowOpacity", "shadowRadius",
            "elevation", "transform",
        ),
        "textDecoration": "textDecorationLine",
        "boxShadow": "elevation",
    },
    events={
        "onClick": "onPress",
        "onDoubleClick": "onLongPress",
        "onChange": "onChangeText",
        "onInput": "onChangeText",
        "onSubmit": "onSubmitEditing",
        "onKeyDown": "onKeyPress",
        "onKeyUp": "onKeyPress",
        "onMouseEnter": "onPressIn",
        "onMouseLeave": "onPressOut",
        "onMouseDown": "onPressIn",
        "onMouseUp": "onPressOut",
        **_identity(
            "onFocus", "onBlur", "onKeyPress", "onScroll", "onLoad", "onError",
            "onPress", "onPressIn", "onPressOut", "onLongPress", "onLayout",
            "onContentSizeChange", "onEndReached", "onRefresh",
            "onMomentumScrollBegin", "onMomentumScrollEnd",
            "onScrollBeginDrag", "onScrollEndDrag",
        ),
    },
)

_PC_DESKTOP = PlatformMapping(
    props={
        **_WEB_PROPS,
        **_identity(
            "draggable", "resizable", "minimizable", "maximizable", "closable",
            "alwaysOnTop", "fullscreenable", "skipTaskbar", "frame",
            "transparent", "hasShadow", "vibrancy", "titleBarStyle",
        ),
    },
    styles={
        **_WEB_STYLES,
        **_identity("WebkitAppRegion", "WebkitUserSelect", "userSelect", "backdropFilter"),
    },
    events={
        **_WEB_EVENTS,
        **_identity(
            "onWindowClose", "onWindowMinimize", "onWindowMaximize",
            "onWindowRestore", "onWindowFocus", "onWindowBlur", "onWindowMove",
            "onWindowResize", "onWindowEnterFullScreen", "onWindowLeaveFullScreen",
            "onFileDrop", "onNewWindow", "onBeforeQuit", "onWillQuit", "onQuit",
        ),
    },
)

DEFAULT_MAPPINGS: dict[PlatformType, PlatformMapping] = {
    PlatformType.PC_WEB: _PC_WEB,
    PlatformType.MOBILE_WEB: _MOBILE_WEB,
    PlatformType.MOBILE_NATIVE: _MOBILE_NATIVE,
    PlatformType.PC_DESKTOP: _PC_DESKTOP,
}

COMPONENT_MAPPINGS: dict[str, dict[PlatformType, PlatformMapping]] = {
    "Button": {
        PlatformType.MOBILE_NATIVE: PlatformMapping(
            props={"variant": "type", "size": "size"},
            events={"onClick": "onPress"},
        ),
        PlatformType.MOBILE_WEB: PlatformMapping(events={"onClick": "onTap"}),
    },
    "Input": {
        PlatformType.MOBILE_NATIVE: PlatformMapping(
            props={"placeholder": "placeholder", "value": "value", "type": "keyboardType"},
            events={"onChange": "onChangeText"},
        ),
    },
}


def to_platform(platform: PlatformType | str) -> PlatformType:
    """Coerce a platform name to ``PlatformType``.

    Raises:
        ValueError: If the name is not a supported platform
    """
    try:
        return PlatformType(platform)
    except ValueError:
        supported = ", ".join(p.value for p in PlatformType)
        raise ValueError(f"Unsupported platform: {platform!r} (expected one of: {supported})") from None
