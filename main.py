import yaml
from pathcalc.simulation import run_calculation

if __name__ == "__main__":
    with open("config/example_config.yaml") as f:
        config = yaml.safe_load(f)

    run_calculation(config)
