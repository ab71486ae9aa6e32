# src/catchdisc/cli/__init__.py
