# library-wide defaults. there is no external configuration source.

DEFAULT_DELIMITER = ", "
CSV_DELIMITER = ","
