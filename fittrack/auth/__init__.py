# -*- coding: utf-8 -*-
"""Auth: registration, login and bearer-token verification."""
