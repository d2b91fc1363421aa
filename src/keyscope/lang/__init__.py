"""Message tables for :mod:`keyscope.i18n`."""
