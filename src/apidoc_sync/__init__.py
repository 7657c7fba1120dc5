"""Synchronized text and tree editing of OpenAPI-style documents."""
