"""
QuadCalc
Main application entry point
"""
import tkinter as tk
import config
from gui import CalculatorGUI


def main():
    print(f"Starting {config.APP_NAME} {config.VERSION}...")
    root = tk.Tk()
    CalculatorGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
