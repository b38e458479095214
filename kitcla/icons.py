"""Inline SVG icons."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Component
from .markup import Element, Raw

ICON_PEN_TO_SQUARE = "pen-to-square"
ICON_EYE = "eye"
ICON_TRASH_CAN = "trash-can"
ICON_CODE = "code"
ICON_FILTER = "filter"
ICON_HOME = "home"
ICON_EXPLOSION = "explosion"
ICON_CHEVRON_RIGHT = "chevron-right"

# Names used by other components; their markup is supplied with Icon.register.
ICON_FAS_CIRCLE_CHECK = "circle-check"
ICON_FAS_CIRCLE_XMARK = "circle-xmark"
ICON_FAS_CIRCLE_EXCLAMATION = "circle-exclamation"
ICON_FAS_CIRCLE_INFO = "circle-info"
ICON_FAS_ELLIPSIS_VERTICAL = "ellipsis-vertical"
ICON_FAS_MINUS = "minus"
ICON_FAS_PLUS = "plus"

_SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'

BUILTIN_SVGS: dict[str, str] = {
    ICON_PEN_TO_SQUARE: (
        '<svg aria-hidden="true" focusable="false" data-prefix="far" data-icon="pen-to-square" '
        f'class="svg-inline--fa fa-pen-to-square" role="img" {_SVG_NS} viewBox="0 0 512 512">'
        '<path fill="currentColor" d="M495.6 49.23l-32.82-32.82C451.8 5.471 437.5 0 423.1 0c-14.33 0-28.66 '
        "5.469-39.6 16.41L167.5 232.5C159.1 240 154.8 249.5 152.4 259.8L128.3 367.2C126.5 376.1 133.4 384 "
        "141.1 384c.916 0 1.852-.0918 2.797-.2813c0 0 74.03-15.71 107.4-23.56c10.1-2.377 19.13-7.459 "
        "26.46-14.79l217-217C517.5 106.5 517.4 71.1 495.6 49.23zM461.7 94.4L244.7 311.4C243.6 312.5 242.5 "
        "313.1 241.2 313.4c-13.7 3.227-34.65 7.857-54.3 12.14l12.41-55.2C199.6 268.9 200.3 267.5 201.4 "
        "266.5l216.1-216.1C419.4 48.41 421.6 48 423.1 48s3.715 .4062 5.65 2.342l32.82 32.83C464.8 86.34 "
        "464.8 91.27 461.7 94.4zM424 288c-13.25 0-24 10.75-24 24v128c0 13.23-10.78 24-24 24h-304c-13.22 "
        "0-24-10.77-24-24v-304c0-13.23 10.78-24 24-24h144c13.25 0 24-10.75 24-24S229.3 64 216 64L71.1 "
        "63.99C32.31 63.99 0 96.29 0 135.1v304C0 479.7 32.31 512 71.1 512h303.1c39.69 0 71.1-32.3 71.1-72L448 "
        '312C448 298.8 437.3 288 424 288z"></path></svg>'
    ),
    ICON_EYE: (
        '<svg aria-hidden="true" focusable="false" data-prefix="far" data-icon="eye" '
        f'class="svg-inline--fa fa-eye" role="img" {_SVG_NS} viewBox="0 0 576 512">'
        '<path fill="currentColor" d="M572.5 238.1C518.3 115.5 410.9 32 288 32S57.69 115.6 3.469 238.1C1.563 '
        "243.4 0 251 0 256c0 4.977 1.562 12.6 3.469 17.03C57.72 396.5 165.1 480 288 480s230.3-83.58 "
        "284.5-206.1C574.4 268.6 576 260.1 576 256C576 251 574.4 243.4 572.5 238.1zM288 432c-99.48 "
        "0-191.2-67.5-239.6-175.1C97.01 147.4 188.6 80 288 80c99.48 0 191.2 67.5 239.6 175.1C478.1 364.6 "
        "387.4 432 288 432zM288 128C217.3 128 160 185.3 160 256s57.33 128 128 128c70.64 0 128-57.32 "
        "128-127.9C416 185.4 358.7 128 288 128zM288 336c-44.11 0-80-35.89-80-80c0-.748 .1992-1.441 "
        ".2207-2.184C213.3 255.1 218.5 256 224 256c35.35 0 64-28.65 64-64c0-5.48-.875-10.72-2.184-15.78C286.6 "
        '176.2 287.3 176 288 176c44.11 0 80 35.89 80 80.05C368 300.1 332.1 336 288 336z"></path></svg>'
    ),
    ICON_TRASH_CAN: (
        '<svg aria-hidden="true" focusable="false" data-prefix="far" data-icon="trash-can" '
        f'class="svg-inline--fa fa-trash-can" role="img" {_SVG_NS} viewBox="0 0 448 512">'
        '<path fill="currentColor" d="M432 80h-82.38l-34-56.75C306.1 8.827 291.4 0 274.6 0H173.4C156.6 0 141 '
        "8.827 132.4 23.25L98.38 80H16C7.125 80 0 87.13 0 96v16C0 120.9 7.125 128 16 128H32v320c0 35.35 "
        "28.65 64 64 64h256c35.35 0 64-28.65 64-64V128h16C440.9 128 448 120.9 448 112V96C448 87.13 440.9 80 "
        "432 80zM171.9 50.88C172.9 49.13 174.9 48 177 48h94c2.125 0 4.125 1.125 5.125 2.875L293.6 80H154.4L171.9 "
        "50.88zM352 464H96c-8.837 0-16-7.163-16-16V128h288v320C368 456.8 360.8 464 352 464zM224 416c8.844 0 "
        "16-7.156 16-16V192c0-8.844-7.156-16-16-16S208 183.2 208 192v208C208 408.8 215.2 416 224 416zM144 "
        "416C152.8 416 160 408.8 160 400V192c0-8.844-7.156-16-16-16S128 183.2 128 192v208C128 408.8 135.2 416 "
        "144 416zM304 416c8.844 0 16-7.156 16-16V192c0-8.844-7.156-16-16-16S288 183.2 288 192v208C288 408.8 "
        '295.2 416 304 416z"></path></svg>'
    ),
    ICON_CODE: (
        f'<svg {_SVG_NS} viewBox="0 0 640 512"><path fill="currentColor" d="M414.8 40.79L286.8 488.8C281.9 '
        "505.8 264.2 515.6 247.2 510.8C230.2 505.9 220.4 488.2 225.2 471.2L353.2 23.21C358.1 6.216 375.8-3.624 "
        "392.8 1.232C409.8 6.087 419.6 23.8 414.8 40.79H414.8zM518.6 121.4L630.6 233.4C643.1 245.9 643.1 266.1 "
        "630.6 278.6L518.6 390.6C506.1 403.1 485.9 403.1 473.4 390.6C460.9 378.1 460.9 357.9 473.4 345.4L562.7 "
        "256L473.4 166.6C460.9 154.1 460.9 133.9 473.4 121.4C485.9 108.9 506.1 108.9 518.6 121.4V121.4zM166.6 "
        "166.6L77.25 256L166.6 345.4C179.1 357.9 179.1 378.1 166.6 390.6C154.1 403.1 133.9 403.1 121.4 "
        "390.6L9.372 278.6C-3.124 266.1-3.124 245.9 9.372 233.4L121.4 121.4C133.9 108.9 154.1 108.9 166.6 "
        '121.4C179.1 133.9 179.1 154.1 166.6 166.6V166.6z"/></svg>'
    ),
    ICON_FILTER: (
        f'<svg {_SVG_NS} viewBox="0 0 512 512"><path fill="currentColor" d="M3.853 54.87C10.47 40.9 24.54 32 '
        "40 32H472C487.5 32 501.5 40.9 508.1 54.87C514.8 68.84 512.7 85.37 502.1 97.33L320 320.9V448C320 460.1 "
        "313.2 471.2 302.3 476.6C291.5 482 278.5 480.9 268.8 473.6L204.8 425.6C196.7 419.6 192 410.1 192 "
        '400V320.9L9.042 97.33C-.745 85.37-2.765 68.84 3.854 54.87L3.853 54.87z"/></svg>'
    ),
    ICON_HOME: (
        f'<svg {_SVG_NS} viewBox="0 0 576 512"><path fill="currentColor" d="M575.8 255.5c0 18-15 32.1-32 '
        "32.1h-32l.7 160.2c0 2.7-.2 5.4-.5 8.1V472c0 22.1-17.9 40-40 40H456c-1.1 0-2.2 0-3.3-.1c-1.4 .1-2.8 "
        ".1-4.2 .1H416 392c-22.1 0-40-17.9-40-40V448 384c0-17.7-14.3-32-32-32H256c-17.7 0-32 14.3-32 32v64 "
        "24c0 22.1-17.9 40-40 40H160 128.1c-1.5 0-3-.1-4.5-.2c-1.2 .1-2.4 .2-3.6 .2H104c-22.1 "
        "0-40-17.9-40-40V360c0-.9 0-1.9 .1-2.8V287.6H32c-18 0-32-14-32-32.1c0-9 3-17 10-24L266.4 8c7-7 15-8 "
        '22-8s15 2 21 7L564.8 231.5c8 7 12 15 11 24z"/></svg>'
    ),
    ICON_CHEVRON_RIGHT: (
        f'<svg {_SVG_NS} viewBox="0 0 384 512"><path fill="currentColor" d="M342.6 233.4c12.5 12.5 12.5 32.8 '
        "0 45.3l-192 192c-12.5 12.5-32.8 12.5-45.3 0s-12.5-32.8 0-45.3L274.7 256 105.4 86.6c-12.5-12.5-12.5-32.8 "
        '0-45.3s32.8-12.5 45.3 0l192 192z"/></svg>'
    ),
    ICON_EXPLOSION: (
        f'<svg {_SVG_NS} viewBox="0 0 576 512"><path fill="currentColor" d="M499.6 11.3c6.7-10.7 20.5-14.5 '
        "31.7-8.5s15.8 19.5 10.6 31L404.8 338.6c2.2 2.3 4.3 4.7 6.3 7.1l97.2-54.7c10.5-5.9 23.6-3.1 30.9 "
        "6.4s6.3 23-2.2 31.5l-87 87H378.5c-13.2-37.3-48.7-64-90.5-64s-77.4 26.7-90.5 64H117.8L42.3 "
        "363.7c-9.7-6.7-13.1-19.6-7.9-30.3s17.4-15.9 28.7-12.4l97.2 30.4c3-3.9 6.1-7.7 9.4-11.3L107.4 "
        "236.3c-6.1-10.1-3.9-23.1 5.1-30.7s22.2-7.5 31.1 .1L246 293.6c1.5-.4 3-.8 4.5-1.1l13.6-142.7c1.2-12.3 "
        "11.5-21.7 23.9-21.7s22.7 9.4 23.9 21.7l13.5 141.9L499.6 11.3zM64 448v0H512v0h32c17.7 0 32 14.3 32 "
        "32s-14.3 32-32 32H32c-17.7 0-32-14.3-32-32s14.3-32 32-32H64zM288 0c13.3 0 24 10.7 24 24V72c0 "
        '13.3-10.7 24-24 24s-24-10.7-24-24V24c0-13.3 10.7-24 24-24z"/></svg>'
    ),
}


@dataclass
class IconMod:
    name: str = ""
    size: str = ""


@dataclass
class Icon:
    """Renders a named SVG icon inside a sized span."""

    component: Component = field(default_factory=Component)
    svgs: dict[str, str] = field(default_factory=lambda: dict(BUILTIN_SVGS))

    def register(self, name: str, svg: str) -> None:
        """Make an icon available under a name."""
        self.svgs[name] = svg

    def icon(self, name: str) -> Element:
        return self.h(IconMod(name=name))

    def icon_with_size(self, name: str, size: str) -> Element:
        return self.h(IconMod(name=name, size=size))

    def h(self, mod: IconMod) -> Element:
        svg = self.svgs.get(mod.name, "")
        if not svg:
            raise ValueError(f"no icon for {mod.name}")
        size = f"h-{mod.size} w-{mod.size}" if mod.size else "h-4 w-4"
        return self.component.h("span", {"class": f"{size} inline-flex items-center"}, Raw(svg))