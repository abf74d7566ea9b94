# -*- coding: utf-8 -*-
"""Users: stored user records and the repository that reads and writes them."""
