# Запускать скрипт командой: python scripts/run_all.py
import sys
from pathlib import Path

# Добавляем корневую папку проекта в путь
sys.path.insert(0, str(Path(__file__).parent.parent))

from recordkeeper.scripts import (
    finance_demo,
    medical_demo,
    inventory_demo,
    grade_report,
    stock_demo,
)

DEMOS = [
    ("Finance", finance_demo.main),
    ("Medical", medical_demo.main),
    ("Inventory", inventory_demo.main),
    ("Grade report", grade_report.main),
    ("Stock log", stock_demo.main),
]


if __name__ == "__main__":
    print("🚀 Running all demos")

    try:
        for title, run in DEMOS:
            print(f"\n===== {title} =====")
            run()
    except KeyboardInterrupt:
        print("\n🛑 Interrupted")
        raise SystemExit(130)

    print("\n✅ All demos finished")
