"""ARIA role and property names used by the components."""

from enum import StrEnum


class Role(StrEnum):
    """Values for the ``role`` attribute."""

    # Landmark roles
    BANNER = "banner"
    NAVIGATION = "navigation"
    MAIN = "main"
    CONTENTINFO = "contentinfo"
    SEARCH = "search"
    COMPLEMENTARY = "complementary"

    # Document structure roles
    APPLICATION = "application"
    ARTICLE = "article"
    DOCUMENT = "document"
    HEADING = "heading"
    IMG = "img"
    LIST = "list"
    LISTITEM = "listitem"
    MATH = "math"
    NOTE = "note"
    PRESENTATION = "presentation"
    REGION = "region"
    SEPARATOR = "separator"
    TOOLBAR = "toolbar"

    # Widget roles
    BUTTON = "button"
    CHECKBOX = "checkbox"
    COMBOBOX = "combobox"
    LINK = "link"
    MENUITEM = "menuitem"
    OPTION = "option"
    RADIO = "radio"
    SCROLLBAR = "scrollbar"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    SWITCH = "switch"
    TAB = "tab"
    TABPANEL = "tabpanel"
    TEXTBOX = "textbox"

    # Composite widget roles
    LISTBOX = "listbox"
    COMBOBOX_LISTBOX = "listbox"
    MENU = "menu"
    MENUBAR = "menubar"
    RADIOGROUP = "radiogroup"
    TABLIST = "tablist"
    TREE = "tree"
    TREEGRID = "treegrid"
    GRID = "grid"

    # Live region roles
    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    LOG = "log"
    MARQUEE = "marquee"
    STATUS = "status"
    TIMER = "timer"

    # Window roles
    DIALOG = "dialog"

    # Table roles
    TABLE = "table"
    ROW = "row"
    ROWGROUP = "rowgroup"
    CELL = "cell"
    COLUMNHEADER = "columnheader"
    ROWHEADER = "rowheader"
    GRIDCELL = "gridcell"

    # Form roles
    FORM = "form"

    # Generic role
    GENERIC = "generic"


class Property(StrEnum):
    """Names of ``aria-*`` attributes."""

    # Global properties
    LABEL = "aria-label"
    LABELLEDBY = "aria-labelledby"
    DESCRIBEDBY = "aria-describedby"
    HIDDEN = "aria-hidden"
    LIVE = "aria-live"
    ATOMIC = "aria-atomic"
    RELEVANT = "aria-relevant"
    OWNS = "aria-owns"
    CONTROLS = "aria-controls"
    FLOWTO = "aria-flowto"

    # Widget properties
    CHECKED = "aria-checked"
    DISABLED = "aria-disabled"
    EXPANDED = "aria-expanded"
    HASPOPUP = "aria-haspopup"
    LEVEL = "aria-level"
    MODAL = "aria-modal"
    MULTILINE = "aria-multiline"
    MULTISELECTABLE = "aria-multiselectable"
    ORIENTATION = "aria-orientation"
    PRESSED = "aria-pressed"
    READONLY = "aria-readonly"
    REQUIRED = "aria-required"
    SELECTED = "aria-selected"
    SORT = "aria-sort"
    VALUEMAX = "aria-valuemax"
    VALUEMIN = "aria-valuemin"
    VALUENOW = "aria-valuenow"
    VALUETEXT = "aria-valuetext"

    # Relationship properties
    ACTIVEDESCENDANT = "aria-activedescendant"
    COLCOUNT = "aria-colcount"
    COLINDEX = "aria-colindex"
    COLSPAN = "aria-colspan"
    DETAILS = "aria-details"
    ERRORMESSAGE = "aria-errormessage"
    KEYSHORTCUTS = "aria-keyshortcuts"
    POSINSET = "aria-posinset"
    ROWCOUNT = "aria-rowcount"
    ROWINDEX = "aria-rowindex"
    ROWSPAN = "aria-rowspan"
    SETSIZE = "aria-setsize"

    # Live region properties
    BUSY = "aria-busy"