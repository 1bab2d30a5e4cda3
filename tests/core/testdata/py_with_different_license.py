#!/usr/bin/env python3
# Copyright (c) 2015 Someone Else
# Licensed under the MIT License.

def greet(name):
    return f"Hello {name}"
