"""
NZWalks Backend — Services Package
===================================

One stateless service per entity. Each call receives the request's
`Repositories` bundle, so a service never holds a session or any other
per-request state.

    region_service           /Regions
    walk_service             /Walks
    walk_difficulty_service  /WalkDifficulties
"""
