# Keeps the repository root on sys.path, so the focus_window namespace
# package imports from a plain checkout as well as from an installation.
