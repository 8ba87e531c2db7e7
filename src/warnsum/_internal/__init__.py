# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Private infrastructure modules for warnsum internals."""
