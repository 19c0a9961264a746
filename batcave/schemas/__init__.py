"""Pydantic Schemas — request/response validation for users and tasks.

Invariants:
    - Schemas validate at system boundary (client input, storage writes, responses)
    - Domain types from core/ used for enum fields
    - Server-controlled task fields appear only on response schemas

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - One explicit class per variant instead of deriving from the ORM model:
      every omission is visible in the class body
"""
