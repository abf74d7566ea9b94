# -*- coding: utf-8 -*-
"""FitTrack: JSON-file backed fitness tracking backend."""
