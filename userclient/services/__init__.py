"""
Service façades over the remote API.

Each module exposes one class grouping the operations of a functional
area.  Services only map operations onto transport calls; headers,
tokens and error translation stay in :mod:`userclient.clients`.
"""
