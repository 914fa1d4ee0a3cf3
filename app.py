from src.payroll_system.payroll_system.main import main

if __name__ == "__main__":
    raise SystemExit(main())
