#!/usr/bin/env python3
# Greets people.

def greet(name):
    return f"Hello {name}"
