#!/usr/bin/env python

import sys
import os
import time
from datetime import timedelta
import argparse
script_dir = os.path.dirname(os.path.abspath(__file__))
module_dir = os.path.join(script_dir, '..')
sys.path.insert(0, module_dir)

from dataclasses import dataclass
import random
import string
import sortby
from sortby.lib.resolver import default_cache

import logging
# logging.basicConfig(level=logging.INFO)
# x = logging.getLogger("sortby.ordering")
# x.setLevel(logging.DEBUG)
# x.propagate = True

@dataclass
class Person :
    last_name : str
    first_name : str
    age : int
    score : float


def build_data(size : int) -> list[Person] :
    def word() :
        return "".join(random.choices(string.ascii_lowercase, k=6))

    return [Person(word(), word(), random.randint(18, 80), random.random()) for _ in range(size)]


def run_test(data : list[Person], spec : str, repeat : int, **options) :

    parse_start_time = time.perf_counter()
    for _ in range(repeat) :
        sortby.parse(spec)
    parse_end_time = time.perf_counter()

    sort_start_time = time.perf_counter()
    for _ in range(repeat) :
        result = sortby.order(data, spec).to_list()
    sort_end_time = time.perf_counter()

    key_start_time = time.perf_counter()
    for _ in range(repeat) :
        sorted(data, key=lambda p : (p.age, p.last_name))
    key_end_time = time.perf_counter()

    if options.get("check", False) :
        for a, b in zip(result, result[1:]) :
            assert (a.age, a.last_name) <= (b.age, b.last_name)

    print(f"Parse time            : {str(timedelta(seconds=parse_end_time - parse_start_time))}")
    print(f"Order time            : {str(timedelta(seconds=sort_end_time - sort_start_time))}")
    print(f"Plain key sort time   : {str(timedelta(seconds=key_end_time - key_start_time))}")

    print("Cache stats:")
    print(default_cache().stats)

if __name__ == "__main__" :
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=10000, help="Number of records to sort")
    parser.add_argument("--repeat", type=int, default=10, help="Number of runs")
    parser.add_argument("--spec", type=str, default="age, last_name", help="Sort spec")
    parser.add_argument("--check", action="store_true", default=False, help="Check the default spec result")
    args = parser.parse_args()
    data = build_data(args.size)
    run_test(data, args.spec, args.repeat, check=args.check)
