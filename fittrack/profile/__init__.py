# -*- coding: utf-8 -*-
"""Profile: updating the signed-in user's name and email."""
