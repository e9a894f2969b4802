"""
Diagnostics.

Small command-line tools that exercise whole calendar ranges; run them via
`caljal diag <tool>`.
"""
