from datetime import date

from gridcal import CalendarGrid, DateSelection, DayPosition, highlight_for

print(CalendarGrid.__version__)  # 0.1.0

# Month pages for the whole of 2022, weeks starting on Monday
grid = CalendarGrid()
grid.configure("2022-01", "2022-12", first_day_of_week="monday", out_date_policy="end_of_row")
print(grid.page_count())  # 12

january = grid.page(0)
print(" ".join(label[:2] for label in grid.weekday_labels(short=True)))
for row in january.rows:
    print(" ".join(f"{day.day:2d}" if day.position is DayPosition.MONTH_DATE else " ." for day in row))

# Jump straight to the page of a date without building the others
index = grid.page_index_for_date(date(2022, 7, 14))
print(index, grid.page_anchor(index))  # 6 2022-07

# Click a start and an end date, then style every cell of July
selection = DateSelection()
for clicked in (date(2022, 6, 28), date(2022, 7, 3)):
    selection = grid.fold_selection(clicked, selection.start, selection.end)
print(selection)

for day in grid.page(index):
    print(day.date, day.position.value, highlight_for(day, selection).value)

# Week pages for a single week, with the same API
weeks = CalendarGrid({"start": "2022-01-05", "end": "2022-01-05", "mode": "week"})
print([day.position.value for day in weeks.page(0)])

# Tabular view (requires pandas)
print(grid.to_frame(0, 1).head())
