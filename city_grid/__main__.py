from city_grid.cli import main

main(prog_name="city-grid")
