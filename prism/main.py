import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from prism.view import arange
from prism.helpers import DEBUG
import time

def main():
  if DEBUG: timer = time.perf_counter()
  t = arange(16)
  u = t[1:14:2]
  v = u[1::2]
  if DEBUG: print(f"Prism index\t{(time.perf_counter() - timer) * 1000:.3f}ms")
  for view in (t, u, v):
    if DEBUG: print(view)
    view.print()

if __name__ == "__main__":
  main()
