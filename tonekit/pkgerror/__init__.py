"""Error aggregation, call stack capture and string sets."""