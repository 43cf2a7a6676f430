"""Badge classes and labels for the git status dropdown."""

AHEAD = "ahead"
BEHIND = "behind"

BADGE_CLASSES = {
    AHEAD: "badge badge-xs badge-warning",
    BEHIND: "badge badge-xs badge-error",
}

BADGE_PREFIXES = {
    AHEAD: "+",
    BEHIND: "-",
}

OTHER_BRANCHES_TITLE = "Other Branches"
