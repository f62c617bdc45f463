"""Performance (monthly district metrics) model."""

PERFORMANCE_DDL = """
CREATE TABLE IF NOT EXISTS performance (
    district_code VARCHAR NOT NULL,
    district_name VARCHAR NOT NULL,
    period VARCHAR NOT NULL,
    total_households BIGINT,
    total_person_days BIGINT,
    total_amount_spent DOUBLE,
    amount_unit VARCHAR,
    avg_days_per_household DOUBLE,
    avg_amount_per_household DOUBLE,
    performance_score INTEGER,
    data_source VARCHAR NOT NULL,
    financial_year VARCHAR,
    month VARCHAR,
    average_wage_rate DOUBLE,
    women_persondays BIGINT,
    sc_persondays BIGINT,
    st_persondays BIGINT,
    completed_works INTEGER,
    ongoing_works INTEGER,
    total_individuals_worked BIGINT,
    total_job_cards BIGINT,
    households_100_days BIGINT,
    differently_abled_worked BIGINT,
    payment_within_15_days DOUBLE,
    last_updated TIMESTAMP,
    PRIMARY KEY (district_code, period)
)
"""

PERFORMANCE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_performance_period ON performance(period)",
]
