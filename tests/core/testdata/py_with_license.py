#!/usr/bin/env python3
# Copyright (c) 2024 Northwind Software Ltd.
# Licensed under the Apache License, Version 2.0.

def greet(name):
    return f"Hello {name}"
