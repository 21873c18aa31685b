"""Quick check of database state."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from productstore.db.database import Database
from productstore.db.product_repo import ProductRepository

with Database() as db:
    products = ProductRepository(db).list_all()

print("=== Products ===")
print(f"Total: {len(products)}")
for p in products:
    print(f"  {p.id[:8]} | {p.name[:40]:<40} | {p.price:>10.2f}")
