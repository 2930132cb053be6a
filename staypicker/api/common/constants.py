class ErrorMessages:
    ERR_INVALID_DATE = 'err_invalid_date'
    ERR_END_BEFORE_START = 'err_end_before_start'
    ERR_MISSING_DATES = 'err_missing_dates'
