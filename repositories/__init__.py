"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates reading a specific data source from disk.
Repositories receive raw parsed documents and return domain model objects.
"""
